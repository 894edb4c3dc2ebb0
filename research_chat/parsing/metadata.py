"""Infer field, complexity, duration and keywords for a research title.

Every function here is deterministic and total: unknown input falls back to
``Multidisiplin`` / ``intermediate`` / the default keyword pair.
"""

from __future__ import annotations

import re
import string
from typing import Optional

from research_chat.models.research import (
    DEFAULT_FIELD,
    DEFAULT_KEYWORDS,
    Complexity,
    TitleMetadata,
)
from research_chat.parsing.vocabulary import (
    ADVANCED_TERMS,
    BEGINNER_TERMS,
    COMPLEXITY_LABEL_TERMS,
    FIELD_FAMILIES,
    FIELD_LABELS,
    TECH_TERMS,
    term_pattern,
)


ADVANCED_LENGTH = 120
MAX_KEYWORDS = 5
MAX_TECH_KEYWORDS = 3

_DURATIONS = {
    Complexity.BEGINNER: "4-6 bulan",
    Complexity.INTERMEDIATE: "6-8 bulan",
    Complexity.ADVANCED: "8-12 bulan",
}

_field_patterns = [
    (label, [term_pattern(term) for term in terms]) for label, terms in FIELD_FAMILIES
]
_advanced_patterns = [re.compile(rf"\b{re.escape(term)}") for term in ADVANCED_TERMS]
_beginner_patterns = [re.compile(rf"\b{re.escape(term)}") for term in BEGINNER_TERMS]


def infer_field(title: str) -> str:
    """Return the first field family whose vocabulary occurs in the title."""
    lowered = title.lower()
    for label, patterns in _field_patterns:
        if any(pattern.search(lowered) for pattern in patterns):
            return label
    return DEFAULT_FIELD


def infer_complexity(title: str) -> Complexity:
    """Classify a title as beginner, intermediate or advanced.

    Long titles and advanced vocabulary win over beginner vocabulary.
    """
    lowered = title.lower()
    if len(title) > ADVANCED_LENGTH or any(p.search(lowered) for p in _advanced_patterns):
        return Complexity.ADVANCED
    if any(p.search(lowered) for p in _beginner_patterns):
        return Complexity.BEGINNER
    return Complexity.INTERMEDIATE


def duration_for(complexity: Complexity) -> str:
    """Duration estimate for a complexity tier."""
    return _DURATIONS[Complexity(complexity)]


def _word_matches(word: str, head: str) -> bool:
    if len(head) <= 3:
        return word == head
    return head in word or (len(word) >= 4 and word in head)


def extract_keywords(title: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Match title words against the technical term list.

    Returns at most three technical terms followed by the default keyword
    pair, de-duplicated and capped at ``limit``.
    """
    words = [word.strip(string.punctuation) for word in title.lower().split()]
    words = [word for word in words if word]

    found: list[str] = []
    for term, label in TECH_TERMS:
        head = term.split()[0]
        if any(_word_matches(word, head) for word in words):
            found.append(label)

    if not found:
        return list(DEFAULT_KEYWORDS)

    keywords = list(dict.fromkeys([*found[:MAX_TECH_KEYWORDS], *DEFAULT_KEYWORDS]))
    return keywords[:limit]


def infer_metadata(title: str) -> TitleMetadata:
    """Infer field, complexity and keywords from the title text alone."""
    return TitleMetadata(
        field=infer_field(title),
        complexity=infer_complexity(title),
        keywords=extract_keywords(title),
    )


def parse_field_label(value: str) -> Optional[str]:
    """Map an explicit "Bidang:" value onto a known field category."""
    cleaned = value.strip().lower()
    if not cleaned:
        return None
    for label in (*FIELD_LABELS, DEFAULT_FIELD):
        if cleaned == label.lower():
            return label
    inferred = infer_field(cleaned)
    return inferred if inferred != DEFAULT_FIELD else None


def parse_complexity_label(value: str) -> Optional[Complexity]:
    """Map an explicit "Kompleksitas:" value onto a tier, if recognizable."""
    lowered = value.lower()
    for tier, terms in COMPLEXITY_LABEL_TERMS:
        if any(term in lowered for term in terms):
            return Complexity(tier)
    return None


def generate_description(title: str) -> str:
    """Templated description for a title that came without one."""
    lowered = title.lower()

    if "implementasi" in lowered:
        return (
            f"Penelitian ini fokus pada implementasi dan pengembangan {lowered}. "
            "Penelitian akan melibatkan analisis mendalam, perancangan sistem, dan evaluasi "
            "kinerja untuk menghasilkan solusi yang efektif dan efisien."
        )
    if "analisis" in lowered:
        return (
            f"Studi analitis mendalam tentang {lowered}. Penelitian akan menggunakan metode "
            "analisis yang komprehensif untuk memahami pola, tren, dan insight yang dapat "
            "memberikan kontribusi signifikan bagi bidang terkait."
        )
    if "pengembangan" in lowered:
        return (
            f"Penelitian pengembangan yang bertujuan untuk menciptakan {lowered}. Melibatkan "
            "proses desain, prototyping, pengujian, dan optimasi untuk menghasilkan inovasi "
            "yang aplikatif dan bermanfaat."
        )
    if "pengaruh" in lowered or "hubungan" in lowered:
        return (
            f"Penelitian kuantitatif yang mengeksplorasi {lowered}. Menggunakan metodologi "
            "penelitian yang ketat untuk mengidentifikasi korelasi, kausalitas, dan dampak "
            "signifikan antar variabel."
        )
    if "optimasi" in lowered or "peningkatan" in lowered:
        return (
            f"Penelitian optimasi yang bertujuan untuk meningkatkan {lowered}. Fokus pada "
            "efisiensi, peningkatan performa, dan praktik terbaik untuk mencapai hasil yang optimal."
        )
    return (
        f"Penelitian inovatif tentang {lowered}. Studi komprehensif yang menggabungkan teori "
        "dan praktik untuk menghasilkan kontribusi ilmiah yang signifikan dan aplikatif di "
        "bidang terkait."
    )
