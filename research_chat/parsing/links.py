"""Extract labeled hyperlinks from AI text."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from research_chat.models.research import Link

FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={domain}&sz=32"
FALLBACK_FAVICON = "/favicon.ico"

# Applied in this order; earlier patterns claim a URL first.
LINK_PATTERNS = (
    # Label: https://example.com
    re.compile(r"([A-Za-z][A-Za-z0-9 \t]*[A-Za-z0-9])[ \t]*:[ \t]*(https?://\S+)"),
    # **Label**: https://example.com
    re.compile(r"\*\*([^*]+)\*\*[ \t]*:[ \t]*(https?://\S+)"),
    # [Label](https://example.com)
    re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)"),
)


def extract_links(text: str) -> list[Link]:
    """Return label/URL pairs found in ``text``, de-duplicated by URL."""
    if not text:
        return []

    links: list[Link] = []
    seen: set[str] = set()
    for pattern in LINK_PATTERNS:
        for match in pattern.finditer(text):
            label = match.group(1).strip()
            href = match.group(2).strip()
            if href in seen:
                continue
            seen.add(href)
            links.append(Link(label=label, href=href))
    return links


def favicon_url(href: str) -> str:
    """Favicon lookup URL for the host of ``href``."""
    try:
        domain = urlparse(href).hostname
    except ValueError:
        domain = None
    if not domain:
        return FALLBACK_FAVICON
    return FAVICON_SERVICE.format(domain=domain)
