"""Plain-text extraction for the reader view.

The extractor is regex based. It prefers the page's
``<article>`` element, then ``<main>``, and otherwise falls back to the whole
document after scripts and styles are removed.
"""

from __future__ import annotations

import html
import logging
import re

import requests

from daily_quiz.constants.network_constants import REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
_ARTICLE_RE = re.compile(r"<article[^>]*>([\s\S]*?)</article>", re.IGNORECASE)
_MAIN_RE = re.compile(r"<main[^>]*>([\s\S]*?)</main>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def extract_article_text(document: str) -> str:
    content = _SCRIPT_RE.sub("", document)
    content = _STYLE_RE.sub("", content)

    match = _ARTICLE_RE.search(content) or _MAIN_RE.search(content)
    if match:
        content = match.group(1)

    content = _TAG_RE.sub(" ", content)
    content = html.unescape(content)
    return _WHITESPACE_RE.sub(" ", content).strip()


def fetch_article(
    url: str,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> str | None:
    """Download ``url`` and return its readable text, or ``None`` on failure."""
    http = session or requests.Session()
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Failed to extract article from %s: %s", url, exc)
        return None
    return extract_article_text(response.text)
