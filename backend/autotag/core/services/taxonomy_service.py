from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


def normalize_tags(tags: Iterable[Any] | None) -> list[str]:
    """Strip and lowercase tags, dropping blanks and duplicates but keeping order."""
    normalized: list[str] = []
    for t in tags or []:
        if not isinstance(t, str):
            continue
        tt = t.strip().lower()
        if tt and tt not in normalized:
            normalized.append(tt)
    return normalized


def merge_tags(suggested: Iterable[Any] | None, existing: Iterable[Any] | None) -> list[str]:
    """Union of suggested and existing tags, suggestions first."""
    return normalize_tags([*(suggested or []), *(existing or [])])
