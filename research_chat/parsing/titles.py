"""Extract research title suggestions from free-form AI responses.

The model is asked for titles in prose, so the response has no fixed
structure. Titles are recovered line by line:

1. A line is a *heading candidate* when it is numbered, bold, quoted,
   header-prefixed or bulleted and long enough.
2. A candidate is accepted as a title when it also uses research vocabulary
   or is long enough to stand on its own.
3. The lines right after a title (bounded lookahead) supply its description
   and any explicit ``Bidang:`` / ``Kompleksitas:`` / ``Durasi:`` /
   ``Kata Kunci:`` labels.
4. Whatever the labels leave open is inferred from the title text.

Usage::

    from research_chat.parsing import extract_titles

    for suggestion in extract_titles(response_text):
        print(suggestion.title, suggestion.field, suggestion.complexity)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

import structlog

from research_chat.models.research import Complexity, ResearchTitleSuggestion
from research_chat.parsing.metadata import (
    MAX_KEYWORDS,
    duration_for,
    generate_description,
    infer_metadata,
    parse_complexity_label,
    parse_field_label,
)
from research_chat.parsing.normalizer import clean_text
from research_chat.parsing.vocabulary import (
    BANNER_EMOJI,
    DURATION_RANGE,
    DURATION_SINGLE,
    INSTRUCTION_PHRASES,
    INTRO_PHRASES,
    INTRO_QUALIFIERS,
    LABEL_KINDS,
    LABEL_LINE,
    METHOD_WORDS,
    RESEARCH_WORDS,
)

logger = structlog.get_logger(__name__)

_numbered = re.compile(r"^\d+\.\s+")
_header = re.compile(r"^#{1,4}\s+")
_bullet = re.compile(r"^[-*+]\s+")
_quote_chars = ('"', "“", "”")

MIN_DESCRIPTION_LENGTH = 10


@dataclass(frozen=True)
class ParserConfig:
    """Length thresholds and lookahead size for title detection."""

    heading_min_length: int = 15
    bold_min_length: int = 20
    plain_title_min_length: int = 30
    lookahead_window: int = 7

    @classmethod
    def from_settings(cls, settings) -> "ParserConfig":
        return cls(
            heading_min_length=settings.parser_heading_min_length,
            bold_min_length=settings.parser_bold_min_length,
            plain_title_min_length=settings.parser_plain_title_min_length,
            lookahead_window=settings.parser_lookahead_window,
        )


@dataclass
class _TitleDraft:
    """Title being accumulated while its lookahead lines are read."""

    title: str
    description_parts: list[str] = field(default_factory=list)
    research_field: Optional[str] = None
    complexity: Optional[Complexity] = None
    duration: Optional[str] = None
    keywords: list[str] = field(default_factory=list)


def label_of(line: str) -> Optional[tuple[str, str]]:
    """Return ``(kind, value)`` when a plain line is a metadata label."""
    match = LABEL_LINE.match(line)
    if not match:
        return None
    kind = LABEL_KINDS.get(match.group("label").lower())
    if kind is None:
        return None
    return kind, match.group("value").strip()


def find_duration(text: str) -> Optional[str]:
    """First duration expression such as ``6-8 bulan`` or ``10 months``."""
    match = DURATION_RANGE.search(text) or DURATION_SINGLE.search(text)
    return match.group(1).strip() if match else None


def _is_intro(line: str) -> bool:
    lowered = line.lower()
    if INTRO_PHRASES.search(lowered):
        return True
    return "judul penelitian" in lowered and bool(INTRO_QUALIFIERS.search(lowered))


class TitleExtractor:
    """Line-oriented heuristic parser for research title suggestions."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()

    def heading_markers(self, line: str) -> set[str]:
        """Markup markers that make a stripped line a heading candidate."""
        cfg = self.config
        length = len(line)
        markers: set[str] = set()
        if _numbered.match(line) and length > cfg.heading_min_length:
            markers.add("numbered")
        if "**" in line and length > cfg.bold_min_length:
            markers.add("bold")
        if any(char in line for char in _quote_chars) and length > cfg.heading_min_length:
            markers.add("quoted")
        if _header.match(line) and length > cfg.heading_min_length:
            markers.add("header")
        if _bullet.match(line) and length > cfg.heading_min_length:
            markers.add("bullet")
        return markers

    def is_excluded(self, line: str) -> bool:
        """Labels, instructions, intros and emoji banners are never titles."""
        plain = clean_text(line)
        return (
            label_of(plain) is not None
            or bool(INSTRUCTION_PHRASES.search(plain))
            or _is_intro(plain)
            or bool(BANNER_EMOJI.search(line))
        )

    def accepts_title(self, line: str) -> bool:
        """Whether a stripped line is accepted as a title heading."""
        return bool(self._accepted_markers(line))

    def _accepted_markers(self, line: str) -> set[str]:
        if not line:
            return set()
        markers = self.heading_markers(line)
        if not markers or self.is_excluded(line):
            return set()
        has_vocabulary = bool(RESEARCH_WORDS.search(line) or METHOD_WORDS.search(line))
        if has_vocabulary or len(line) > self.config.plain_title_min_length:
            return markers
        return set()

    def extract(self, text: str) -> list[ResearchTitleSuggestion]:
        """Parse one AI response into title suggestions, in source order."""
        if not text:
            return []

        lines = text.splitlines()
        suggestions: list[ResearchTitleSuggestion] = []
        index = 0

        while index < len(lines):
            line = lines[index].strip()
            if not self.accepts_title(line):
                index += 1
                continue

            title = clean_text(line)
            if not title:
                index += 1
                continue

            draft = _TitleDraft(title=title)
            index = self._read_details(lines, index + 1, draft)
            suggestions.append(self._finalize(draft))

        logger.debug("Extracted research titles", count=len(suggestions), lines=len(lines))
        return suggestions

    def _read_details(self, lines: list[str], start: int, draft: _TitleDraft) -> int:
        """Consume lookahead lines into the draft; return the next unread index."""
        end = min(start + self.config.lookahead_window, len(lines))
        index = start
        while index < end:
            line = lines[index].strip()
            if not line or _numbered.match(line) or _header.match(line):
                break
            if self._accepted_markers(line) - {"bullet"}:
                break
            self._absorb(line, draft)
            index += 1
        return index

    def _absorb(self, line: str, draft: _TitleDraft) -> None:
        plain = clean_text(line)
        label = label_of(plain)
        if label is not None:
            self._apply_label(*label, draft)
            return
        if INSTRUCTION_PHRASES.search(plain):
            return
        if draft.duration is None and DURATION_RANGE.search(plain):
            draft.duration = find_duration(plain)
        if len(plain) > MIN_DESCRIPTION_LENGTH:
            draft.description_parts.append(plain)

    def _apply_label(self, kind: str, value: str, draft: _TitleDraft) -> None:
        if kind == "description":
            if value:
                draft.description_parts.append(value)
        elif kind == "field":
            draft.research_field = parse_field_label(value) or draft.research_field
        elif kind == "complexity":
            draft.complexity = parse_complexity_label(value) or draft.complexity
        elif kind == "duration":
            draft.duration = find_duration(value) or draft.duration
        elif kind == "keywords":
            keywords = [item.strip() for item in value.split(",") if item.strip()]
            if keywords:
                draft.keywords = keywords[:MAX_KEYWORDS]

    def _finalize(self, draft: _TitleDraft) -> ResearchTitleSuggestion:
        # Explicit labels win; the title text fills the gaps.
        inferred = infer_metadata(draft.title)
        complexity = draft.complexity or inferred.complexity
        description = " ".join(draft.description_parts).strip()
        return ResearchTitleSuggestion(
            title=draft.title,
            description=description or generate_description(draft.title),
            field=draft.research_field or inferred.field,
            complexity=complexity,
            estimated_duration=draft.duration or duration_for(complexity),
            keywords=draft.keywords or inferred.keywords,
        )


def extract_titles(text: str, config: Optional[ParserConfig] = None) -> list[ResearchTitleSuggestion]:
    """Extract research title suggestions from one AI response."""
    return TitleExtractor(config).extract(text)
