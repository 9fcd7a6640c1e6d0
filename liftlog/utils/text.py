"""Text helpers."""

from __future__ import annotations

import re


def slugify(value: str, max_len: int = 50) -> str:
    """Generate an id-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    if not slug:
        slug = "exercise"
    return slug[:max_len]


def truncate_label(value: str, max_len: int = 6) -> str:
    """Shorten chart labels, marking the cut with an ellipsis."""
    return value if len(value) <= max_len else value[:max_len] + "…"
