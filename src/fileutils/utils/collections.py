from __future__ import annotations

from typing import Iterable, List, Set


def remove_duplicates(elements: Iterable[str]) -> List[str]:
    """
    Return a new list with repeated strings removed.

    Order is preserved and the first occurrence of each value is kept.
    """
    seen: Set[str] = set()
    result: List[str] = []
    for item in elements:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result
