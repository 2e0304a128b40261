"""Component for reading the text of a web article."""

from __future__ import annotations

from threading import Thread

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from daily_quiz.constants.ui_constants import (
    READER_HEADER,
    READER_LOAD_BUTTON,
    READER_URL_PLACEHOLDER,
)
from daily_quiz.core.article_extractor import fetch_article
from daily_quiz.core.markdown_renderer import renderer
from daily_quiz.core.request_token import RequestSequence
from daily_quiz.styling.styles import Styles
from daily_quiz.ui.dialog_helpers import show_warning


class _ArticleLoader(QObject):
    finished = Signal(int, str, object)

    def run(self, token: int, url: str) -> None:
        Thread(target=lambda: self.finished.emit(token, url, fetch_article(url)), daemon=True).start()


class ReaderPanel(QWidget):
    """Fetches a page and shows its readable text."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._text_size: int = 18
        self._requests = RequestSequence()
        self._loader = _ArticleLoader(self)
        self._loader.finished.connect(self._handle_loaded)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header = QLabel(READER_HEADER, self)
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet(Styles.get_header_style())
        layout.addWidget(header)

        url_row = QHBoxLayout()
        self.url_edit = QLineEdit(self)
        self.url_edit.setPlaceholderText(READER_URL_PLACEHOLDER)
        self.url_edit.returnPressed.connect(self._handle_load)
        url_row.addWidget(self.url_edit, stretch=1)
        self.load_button = QPushButton(READER_LOAD_BUTTON, self)
        self.load_button.clicked.connect(self._handle_load)
        url_row.addWidget(self.load_button)
        layout.addLayout(url_row)

        self.article_view = QTextBrowser(self)
        layout.addWidget(self.article_view, stretch=1)

    def _handle_load(self) -> None:
        url = self.url_edit.text().strip()
        if not url:
            return
        if "://" not in url:
            url = f"https://{url}"
        self.load_button.setEnabled(False)
        self.article_view.setPlainText("Loading…")
        self._loader.run(self._requests.next(), url)

    def _handle_loaded(self, token: int, url: str, text: str | None) -> None:
        # Only the most recently requested page may replace the view.
        if not self._requests.is_current(token):
            return
        self.load_button.setEnabled(True)
        if text is None:
            self.article_view.clear()
            show_warning(self, "Reader", f"Could not load {url}.")
            return
        self.article_view.setHtml(renderer.render_article(url, text, self._text_size))

    def apply_text_size(self, text_size: int) -> None:
        self._text_size = text_size
