"""Component for playing a round: questions, hint challenges and the result page."""

from __future__ import annotations

import logging
from threading import Thread
from typing import Callable

from PySide6.QtCore import QObject, Qt, QTimer, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QStackedWidget,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from daily_quiz.constants.hint_constants import HINT_TICK_INTERVAL_MS
from daily_quiz.constants.quiz_constants import ANSWER_REVEAL_DELAY_MS
from daily_quiz.constants.ui_constants import (
    HINT_BUTTON_SHAKE,
    HINT_BUTTON_SHOUT,
    HINT_BUTTON_SWIPE,
    HINT_COUNT_TEMPLATE,
    HINT_LOUD_TEMPLATE,
    HINT_PROMPT_SHAKE,
    HINT_PROMPT_SHOUT,
    HINT_PROMPT_SWIPE,
    HINT_RESULT_FAIL,
    HINT_RESULT_STRONG,
    HINT_RESULT_WEAK,
    HINT_SECONDS_TEMPLATE,
    HINTS_REMAINING_TEMPLATE,
    LOADING_TEMPLATE,
    QUESTION_HEADER_TEMPLATE,
    RESULT_BACK_BUTTON,
    RESULT_HEADER,
    RESULT_RETRY_BUTTON,
    RESULT_SCORE_TEMPLATE,
)
from daily_quiz.core.hint_challenge import ActiveChallenge
from daily_quiz.core.hint_evaluator import encouragement_for
from daily_quiz.core.markdown_renderer import renderer
from daily_quiz.core.models import Category, HintModality, HintTier, Question, QuizResult
from daily_quiz.core.quiz_manager import QuizManager
from daily_quiz.core.request_token import RequestSequence
from daily_quiz.core.sensor_sampler import MicrophoneUnavailableError
from daily_quiz.core.services.history_stats import result_message
from daily_quiz.core.services.history_store import HistoryStoreError
from daily_quiz.core.services.question_source import QuestionSourceError
from daily_quiz.styling.styles import Styles
from daily_quiz.ui.components.swipe_pad import SwipePad
from daily_quiz.ui.dialog_helpers import show_load_failed, show_microphone_required, show_warning

logger = logging.getLogger(__name__)

_HINT_PROMPTS = {
    HintModality.SHAKE: HINT_PROMPT_SHAKE,
    HintModality.SWIPE: HINT_PROMPT_SWIPE,
    HintModality.SHOUT: HINT_PROMPT_SHOUT,
}

_HINT_RESULTS = {
    HintTier.FAIL: HINT_RESULT_FAIL,
    HintTier.WEAK: HINT_RESULT_WEAK,
    HintTier.STRONG: HINT_RESULT_STRONG,
}


class _RoundLoader(QObject):
    """Fetches questions off the UI thread and hands them back, tagged, through signals."""

    loaded = Signal(int, object)
    failed = Signal(int, str)

    def run(self, token: int, fetch: Callable[[], list[Question]]) -> None:
        Thread(target=self._load, args=(token, fetch), daemon=True).start()

    def _load(self, token: int, fetch: Callable[[], list[Question]]) -> None:
        try:
            questions = fetch()
        except QuestionSourceError as exc:
            logger.error("Could not load questions: %s", exc)
            self.failed.emit(token, str(exc))
            return
        self.loaded.emit(token, questions)


class QuizPanel(QWidget):
    """UI component for a running round."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        swipe_pad: SwipePad,
        on_exit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.swipe_pad = swipe_pad
        self.on_exit = on_exit

        self._text_size: int = 18
        self._reveal_token: int = 0
        self._loading: bool = False
        self._load_requests = RequestSequence()
        self._pending: tuple[Category, str | None, int] | None = None

        self._loader = _RoundLoader(self)
        self._loader.loaded.connect(self._handle_round_loaded)
        self._loader.failed.connect(self._handle_round_failed)

        self._build_ui()
        self._configure_hint_timer()
        self.quiz_manager.set_sample_listener(self._handle_hint_sample)

    # --- Layout ---

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        self.page_stack = QStackedWidget(self)
        layout.addWidget(self.page_stack)

        self.loading_page = QLabel("", self)
        self.loading_page.setAlignment(Qt.AlignCenter)
        self.page_stack.addWidget(self.loading_page)

        self.question_page = QWidget(self)
        self._build_question_page(self.question_page)
        self.page_stack.addWidget(self.question_page)

        self.result_page = QWidget(self)
        self._build_result_page(self.result_page)
        self.page_stack.addWidget(self.result_page)

    def _build_question_page(self, page: QWidget) -> None:
        layout = QVBoxLayout()
        page.setLayout(layout)

        self.header_label = QLabel("", page)
        layout.addWidget(self.header_label)

        self.question_view = QTextBrowser(page)
        self.question_view.setMaximumHeight(180)
        layout.addWidget(self.question_view)

        hint_row = QHBoxLayout()
        self.hints_label = QLabel("", page)
        hint_row.addWidget(self.hints_label)
        hint_row.addStretch()
        self.hint_buttons: dict[HintModality, QPushButton] = {}
        for modality, text in (
            (HintModality.SHAKE, HINT_BUTTON_SHAKE),
            (HintModality.SWIPE, HINT_BUTTON_SWIPE),
            (HintModality.SHOUT, HINT_BUTTON_SHOUT),
        ):
            button = QPushButton(text, page)
            button.clicked.connect(lambda _checked=False, value=modality: self._handle_hint_request(value))
            hint_row.addWidget(button)
            self.hint_buttons[modality] = button
        layout.addLayout(hint_row)

        self.hint_banner = QWidget(page)
        banner_layout = QVBoxLayout()
        self.hint_banner.setLayout(banner_layout)
        self.hint_prompt_label = QLabel("", self.hint_banner)
        self.hint_prompt_label.setStyleSheet(Styles.get_hint_banner_style())
        self.hint_prompt_label.setAlignment(Qt.AlignCenter)
        banner_layout.addWidget(self.hint_prompt_label)
        self.hint_progress_label = QLabel("", self.hint_banner)
        self.hint_progress_label.setAlignment(Qt.AlignCenter)
        banner_layout.addWidget(self.hint_progress_label)
        self.hint_seconds_label = QLabel("", self.hint_banner)
        self.hint_seconds_label.setAlignment(Qt.AlignCenter)
        banner_layout.addWidget(self.hint_seconds_label)
        self.hint_encouragement_label = QLabel("", self.hint_banner)
        self.hint_encouragement_label.setAlignment(Qt.AlignCenter)
        banner_layout.addWidget(self.hint_encouragement_label)
        self.swipe_pad.setParent(self.hint_banner)
        banner_layout.addWidget(self.swipe_pad)
        self.hint_banner.setVisible(False)
        layout.addWidget(self.hint_banner)

        self.hint_status_label = QLabel("", page)
        self.hint_status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.hint_status_label)

        self.answer_buttons: list[QPushButton] = []
        for idx in range(4):
            button = QPushButton("", page)
            button.clicked.connect(lambda _checked=False, position=idx: self._handle_answer_at(position))
            layout.addWidget(button)
            self.answer_buttons.append(button)
        layout.addStretch()

    def _build_result_page(self, page: QWidget) -> None:
        layout = QVBoxLayout()
        page.setLayout(layout)
        layout.addStretch()

        header = QLabel(RESULT_HEADER, page)
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet(Styles.get_header_style())
        layout.addWidget(header)

        self.result_score_label = QLabel("", page)
        self.result_score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.result_score_label)

        self.result_message_label = QLabel("", page)
        self.result_message_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.result_message_label)

        button_row = QHBoxLayout()
        self.retry_button = QPushButton(RESULT_RETRY_BUTTON, page)
        self.retry_button.clicked.connect(self._handle_retry)
        button_row.addWidget(self.retry_button)
        self.back_button = QPushButton(RESULT_BACK_BUTTON, page)
        self.back_button.clicked.connect(self._handle_back)
        button_row.addWidget(self.back_button)
        layout.addLayout(button_row)
        layout.addStretch()

    def _configure_hint_timer(self) -> None:
        self.hint_timer = QTimer(self)
        self.hint_timer.setInterval(HINT_TICK_INTERVAL_MS)
        self.hint_timer.timeout.connect(self._tick_hint)

    # --- Round lifecycle ---

    def start_round(self, category: Category, difficulty: str | None, count: int) -> None:
        self._show_loading(difficulty or "any")
        self._pending = (category, difficulty, count)
        token = self._load_requests.next()
        self._loader.run(token, lambda: self.quiz_manager.fetch_questions(category, difficulty, count))

    def _handle_retry(self) -> None:
        category = self.quiz_manager.get_category()
        if category is None:
            return
        self.start_round(category, self.quiz_manager.get_difficulty(), self.quiz_manager.get_question_count())

    def _show_loading(self, difficulty: str) -> None:
        self._loading = True
        self._cancel_pending_reveal()
        self.loading_page.setText(LOADING_TEMPLATE.format(difficulty=difficulty))
        self.page_stack.setCurrentWidget(self.loading_page)

    def _handle_round_loaded(self, token: int, questions: list[Question]) -> None:
        if not self._load_requests.is_current(token) or self._pending is None:
            logger.debug("Discarding questions from superseded load %d", token)
            return
        category, difficulty, count = self._pending
        self._pending = None
        self._loading = False
        self.quiz_manager.begin_round(category, difficulty, count, questions)
        self.hint_status_label.setText("")
        self.page_stack.setCurrentWidget(self.question_page)
        self._refresh_question()

    def _handle_round_failed(self, token: int, message: str) -> None:
        if not self._load_requests.is_current(token):
            logger.debug("Ignoring failure of superseded load %d", token)
            return
        self._pending = None
        self._loading = False
        show_load_failed(self, message)
        self.on_exit()

    def _handle_back(self) -> None:
        self.leave()
        self.on_exit()

    def leave(self) -> None:
        """Stop any running hint, drop an in-flight load and reset an unfinished round."""
        self.hint_timer.stop()
        self._cancel_pending_reveal()
        self.quiz_manager.leave_screen()
        self.hint_banner.setVisible(False)
        self.hint_status_label.setText("")
        if self._loading:
            self._load_requests.invalidate()
            self._pending = None
            self._loading = False
            self.on_exit()
            return
        if self.page_stack.currentWidget() is self.question_page:
            self._refresh_question()

    def _cancel_pending_reveal(self) -> None:
        self._reveal_token += 1

    # --- Question view ---

    def _refresh_question(self) -> None:
        quiz_round = self.quiz_manager.get_round()
        if quiz_round is None:
            return
        question = quiz_round.current_question
        difficulty = (self.quiz_manager.get_difficulty() or question.difficulty_label or "mixed").capitalize()
        self.header_label.setText(
            QUESTION_HEADER_TEMPLATE.format(
                number=quiz_round.current_index + 1,
                total=quiz_round.total,
                difficulty=difficulty,
                score=quiz_round.score,
            )
        )
        self.question_view.setHtml(renderer.render_question(question.text, self._text_size))
        self.hints_label.setText(HINTS_REMAINING_TEMPLATE.format(count=quiz_round.hint_budget))

        hint_available = self.quiz_manager.can_start_hint()
        for button in self.hint_buttons.values():
            button.setEnabled(hint_available)

        hint_running = self.quiz_manager.is_hint_active()
        eliminated = quiz_round.eliminated_answers
        selected = quiz_round.selected_answer
        for button, answer in zip(self.answer_buttons, question.answers):
            # "&" would otherwise be read as a mnemonic marker.
            button.setText(answer.replace("&", "&&"))
            button.setEnabled(not hint_running and quiz_round.is_answer_enabled(answer))
            if selected is not None and answer == question.correct_answer:
                state = "correct"
            elif selected is not None and answer == selected:
                state = "incorrect"
            elif answer in eliminated:
                state = "eliminated"
            else:
                state = "idle"
            button.setStyleSheet(Styles.get_answer_style(state, font_size=self._text_size))

    def _handle_answer_at(self, position: int) -> None:
        quiz_round = self.quiz_manager.get_round()
        if quiz_round is None:
            return
        answers = quiz_round.current_question.answers
        if 0 <= position < len(answers):
            self._handle_answer(answers[position])

    def _handle_answer(self, answer: str) -> None:
        is_correct = self.quiz_manager.select_answer(answer)
        if is_correct is None:
            return
        self.hint_status_label.setText("")
        self._refresh_question()
        token = self._reveal_token
        QTimer.singleShot(ANSWER_REVEAL_DELAY_MS, lambda: self._advance_after_reveal(token))

    def _advance_after_reveal(self, token: int) -> None:
        if token != self._reveal_token:
            return
        try:
            result = self.quiz_manager.advance_question()
        except HistoryStoreError as exc:
            show_warning(self, "History not saved", str(exc))
            result = self.quiz_manager.get_last_result()

        quiz_round = self.quiz_manager.get_round()
        if quiz_round is not None and quiz_round.is_finished() and result is not None:
            self._show_result(result)
            return
        self._refresh_question()

    def _show_result(self, result: QuizResult) -> None:
        self.result_score_label.setText(
            RESULT_SCORE_TEMPLATE.format(score=result.score, total=result.total, percentage=result.percentage)
        )
        self.result_message_label.setText(result_message(result.percentage))
        self.page_stack.setCurrentWidget(self.result_page)

    # --- Hints ---

    def _handle_hint_request(self, modality: HintModality) -> None:
        try:
            started = self.quiz_manager.start_hint(modality)
        except MicrophoneUnavailableError as exc:
            logger.warning("Shout hint unavailable: %s", exc)
            show_microphone_required(self, str(exc))
            return
        if not started:
            return

        state = self.quiz_manager.get_hint_state()
        self.hint_status_label.setText("")
        self.hint_prompt_label.setText(_HINT_PROMPTS[modality])
        self.swipe_pad.setVisible(modality is HintModality.SWIPE)
        self.hint_banner.setVisible(True)
        if isinstance(state, ActiveChallenge):
            self._update_hint_banner(state)
        self.hint_timer.start()
        self._refresh_question()

    def _tick_hint(self) -> None:
        outcome = self.quiz_manager.tick_hint()
        state = self.quiz_manager.get_hint_state()
        if isinstance(state, ActiveChallenge):
            self._update_hint_banner(state)
            return

        self.hint_timer.stop()
        self.hint_banner.setVisible(False)
        if outcome is not None:
            self.hint_status_label.setText(_HINT_RESULTS[outcome.tier])
        self._refresh_question()

    def _handle_hint_sample(self, state: ActiveChallenge) -> None:
        self._update_hint_banner(state)

    def _update_hint_banner(self, state: ActiveChallenge) -> None:
        if state.modality is HintModality.SHOUT:
            progress = HINT_LOUD_TEMPLATE.format(seconds=state.accumulator, volume=state.volume)
        else:
            progress = HINT_COUNT_TEMPLATE.format(count=int(state.accumulator))
        self.hint_progress_label.setText(progress)
        self.hint_seconds_label.setText(HINT_SECONDS_TEMPLATE.format(seconds=state.remaining_seconds))
        self.hint_encouragement_label.setText(encouragement_for(state.modality, state.accumulator))

    def apply_text_size(self, text_size: int) -> None:
        self._text_size = text_size
        style = f"font-size: {max(10, text_size - 4)}pt;"
        self.header_label.setStyleSheet(style)
        self.hint_progress_label.setStyleSheet(style)
        self.hint_seconds_label.setStyleSheet(style)
        self.result_score_label.setStyleSheet(f"font-size: {text_size + 6}pt; font-weight: bold;")
        self.result_message_label.setStyleSheet(f"font-size: {text_size}pt;")
        if self.quiz_manager.get_round() is not None and self.page_stack.currentWidget() is self.question_page:
            self._refresh_question()
