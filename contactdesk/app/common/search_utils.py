from __future__ import annotations

from typing import Optional


def normalize_search_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = value.strip()
    return text or None


def text_after_marker(text: str, marker: str) -> str:
    """Texto a partir del primer *marker* encontrado, sin espacios en los extremos."""
    start = text.find(marker)
    if start < 0:
        raise ValueError(f"marker not found: {marker!r}")
    return text[start + len(marker):].strip()
