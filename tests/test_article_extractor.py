"""Tests for the reader view's article extraction."""

import requests

from daily_quiz.core.article_extractor import extract_article_text, fetch_article


class TestExtractArticleText:
    def test_prefers_article_element(self):
        document = """
            <html><head><style>p { color: red; }</style></head>
            <body><nav>Menu</nav>
            <article><h1>Title</h1><p>First &amp; second.</p>
            <script>alert("x")</script></article>
            <footer>Footer</footer></body></html>
        """
        assert extract_article_text(document) == "Title First & second."

    def test_falls_back_to_main(self):
        document = "<body><header>Top</header><main><p>Body text</p></main></body>"
        assert extract_article_text(document) == "Body text"

    def test_uses_whole_document_without_landmarks(self):
        document = "<body><div>One</div>\n\n<div>Two</div></body>"
        assert extract_article_text(document) == "One Two"


class _Response:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError("boom")


class _Session:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error

    def get(self, url, timeout=None):
        if self._error is not None:
            raise self._error
        return self._response


class TestFetchArticle:
    def test_returns_text(self):
        session = _Session(_Response("<article>Hello</article>"))
        assert fetch_article("https://example.org", session=session) == "Hello"

    def test_returns_none_on_failure(self):
        assert fetch_article("https://example.org", session=_Session(error=requests.Timeout("slow"))) is None
        assert fetch_article("https://example.org", session=_Session(_Response("", 404))) is None
