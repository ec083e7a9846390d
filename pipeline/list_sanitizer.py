"""List sanitizer — turns pasted text into clean list items.

Users (and LLM-assisted forms) often send list fields such as pain points or
benefits as one string: newline separated, `;` separated, inline " - "
bullets, or an HTML <ul>. This module converts any of those into a list of
plain strings. HTML is handled with BeautifulSoup.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_BULLET_RE = re.compile(r"^[\*\-•→▸▹►◆◇○●]\s*")
_NUMBER_RE = re.compile(r"^\d+[\.\)\-]\s*")
_CHECKBOX_RE = re.compile(r"^\[[\sx✓✔]\]\s*", re.IGNORECASE)
_QUOTE_RE = re.compile(r"^>\s*")
_HTML_LIST_RE = re.compile(r"<(ul|ol|li)[^>]*>", re.IGNORECASE)


def strip_html(text: str) -> str:
    """Remove all HTML tags and decode entities."""
    if "<" not in text and "&" not in text:
        return text
    return BeautifulSoup(text, "html.parser").get_text()


def contains_html_list(text: str) -> bool:
    return bool(_HTML_LIST_RE.search(text))


def extract_html_list_items(text: str) -> list[str]:
    """Return the inner text of every <li> element."""
    soup = BeautifulSoup(text, "html.parser")
    return [li.get_text() for li in soup.find_all("li")]


def clean_markdown_prefix(text: str) -> str:
    text = text.strip()
    text = _BULLET_RE.sub("", text)
    text = _NUMBER_RE.sub("", text)
    text = _CHECKBOX_RE.sub("", text)
    text = _QUOTE_RE.sub("", text)
    return text.strip()


def clean_list_item(item: str) -> str:
    """HTML tags → entities → markdown prefixes → trim."""
    return clean_markdown_prefix(strip_html(item))


def _split_string(content: str) -> list[str]:
    if contains_html_list(content):
        items = extract_html_list_items(content)
        if items:
            return items
        return strip_html(content).split("\n")
    if "\n" in content:
        return content.split("\n")
    if ";" in content:
        return content.split(";")
    if " - " in content and len(content.split(" - ")) >= 3:
        return content.split(" - ")
    return [content]


def sanitize_list_content(content: Any, min_item_length: int = 5) -> list[str]:
    """Normalize a list field into clean strings.

    Accepts a list (each item cleaned) or a string (split on the first
    separator style found). Items shorter than ``min_item_length`` after
    cleaning are dropped. Any other type yields an empty list.
    """
    if content is None:
        return []

    if isinstance(content, (list, tuple)):
        items = [clean_list_item(i) if isinstance(i, str) else str(i) for i in content]
        return [i for i in items if len(i) >= min_item_length]

    if isinstance(content, str):
        items = [clean_list_item(line) for line in _split_string(content)]
        cleaned = [i for i in items if len(i) >= min_item_length]
        logger.debug("List sanitizer: %d chars → %d items", len(content), len(cleaned))
        return cleaned

    logger.warning("List sanitizer: unexpected type %s", type(content).__name__)
    return []
