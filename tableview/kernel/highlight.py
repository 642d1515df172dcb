"""
tableview Kernel — Match Highlighting

Pure, column-value level. The query is always treated as literal text:
it is escaped before the pattern is built, so "(", "*", "[" and friends
never reach the regex engine as syntax.

Matches are found left to right, case-insensitively, and never overlap
(the scan resumes after the end of each match).
"""

from __future__ import annotations

from html import escape as _html_escape
from html import unescape as _html_unescape

from tableview.kernel.engine import match_pattern, normalize_query

HIGHLIGHT_OPEN = '<span class="highlight">'
HIGHLIGHT_CLOSE = "</span>"


def find_matches(value: str | None, query: str | None) -> list[tuple[int, int]]:
    """(start, end) offsets of every match of query in value."""
    needle = normalize_query(query)
    text = value or ""
    if not needle or not text:
        return []
    return [m.span() for m in match_pattern(needle).finditer(text)]


def highlight_segments(value: str | None, query: str | None) -> list[tuple[str, bool]]:
    """
    Split value into (text, matched) segments.
    Concatenating the texts always gives back the original value.
    """
    text = value or ""
    segments: list[tuple[str, bool]] = []
    pos = 0
    for start, end in find_matches(text, query):
        if start > pos:
            segments.append((text[pos:start], False))
        segments.append((text[start:end], True))
        pos = end
    if pos < len(text):
        segments.append((text[pos:], False))
    return segments


def highlight(
    value: str | None,
    query: str | None,
    open_marker: str = HIGHLIGHT_OPEN,
    close_marker: str = HIGHLIGHT_CLOSE,
) -> str:
    """
    Wrap every match in the markers. No escaping is applied, so the
    result is ambiguous when the value itself contains a marker; use
    highlight_html where the markers must be removable.
    Empty query or no match returns the value unchanged.
    """
    text = value or ""
    if not normalize_query(query):
        return text
    return "".join(
        f"{open_marker}{chunk}{close_marker}" if matched else chunk
        for chunk, matched in highlight_segments(text, query)
    )


def highlight_html(value: str | None, query: str | None) -> str:
    """HTML-safe highlight: each segment is escaped before wrapping."""
    return "".join(
        f"{HIGHLIGHT_OPEN}{_html_escape(chunk, quote=True)}{HIGHLIGHT_CLOSE}"
        if matched
        else _html_escape(chunk, quote=True)
        for chunk, matched in highlight_segments(value, query)
    )


def strip_markers(text: str) -> str:
    """
    Inverse of highlight_html(): drop the markers, then unescape.
    Escaped text never contains "<", so every marker found was inserted
    by highlight_html and a value holding marker text survives intact.
    """
    return _html_unescape(text.replace(HIGHLIGHT_OPEN, "").replace(HIGHLIGHT_CLOSE, ""))
