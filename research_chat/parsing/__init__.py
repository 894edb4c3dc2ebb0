"""Heuristic parsers turning free-form AI text into structured objects."""

from research_chat.parsing.links import extract_links, favicon_url
from research_chat.parsing.metadata import (
    duration_for,
    extract_keywords,
    generate_description,
    infer_complexity,
    infer_field,
    infer_metadata,
)
from research_chat.parsing.normalizer import clean_text, strip_markdown
from research_chat.parsing.titles import ParserConfig, TitleExtractor, extract_titles

__all__ = [
    "ParserConfig",
    "TitleExtractor",
    "clean_text",
    "duration_for",
    "extract_keywords",
    "extract_links",
    "extract_titles",
    "favicon_url",
    "generate_description",
    "infer_complexity",
    "infer_field",
    "infer_metadata",
    "strip_markdown",
]
