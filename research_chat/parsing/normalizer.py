"""Helpers for stripping markdown decoration from AI text."""

from __future__ import annotations

import re


_ordinal = re.compile(r"^\s*\d+\.(?!\d)\s*")
_heading = re.compile(r"^#{1,6}\s*")
_bullet = re.compile(r"^\s*[-*+]\s+")
_quotes = re.compile("[\"'“”‘’]")

_md_heading = re.compile(r"^[ \t]*#{1,6}[ \t]*", re.MULTILINE)
_md_bullet = re.compile(r"^[ \t]*[-*+•][ \t]+", re.MULTILINE)
_md_ordinal = re.compile(r"^[ \t]*\d+\.(?!\d)[ \t]*", re.MULTILINE)
_md_link = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_blank_runs = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
    """Return a single line with markdown decoration removed.

    Strips a leading ordinal, heading markers, bold and italic markers,
    backticks, a leading bullet, a second ordinal (``### 1. Title``) and
    decorative quotes, then trims whitespace.
    """
    if not text:
        return ""
    cleaned = _ordinal.sub("", text, count=1)
    cleaned = _heading.sub("", cleaned, count=1)
    cleaned = cleaned.replace("**", "").replace("*", "").replace("`", "")
    cleaned = _bullet.sub("", cleaned, count=1)
    cleaned = _ordinal.sub("", cleaned, count=1)
    cleaned = _quotes.sub("", cleaned)
    return cleaned.strip()


def strip_markdown(text: str) -> str:
    """Render a whole response as plain text, keeping line structure."""
    if not text:
        return ""
    plain = _md_bullet.sub("", text)
    plain = _md_heading.sub("", plain)
    plain = _md_ordinal.sub("", plain)
    plain = plain.replace("**", "").replace("*", "").replace("`", "")
    plain = _md_link.sub(r"\1", plain)
    plain = _blank_runs.sub("\n\n", plain)
    return plain.strip()
