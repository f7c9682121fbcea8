# Path: pod_verifier/engine/tools/formatting/categorizer.py
"""
Entry categorization by name.

Categories and importance are derived from the entry name only, using
the fixed tables in constants/display.py.
"""

from ...constants.display import (
    EntryCategory,
    CATEGORY_ORDER,
    CATEGORY_RULES,
    CATEGORY_INFO,
    IMPORTANT_FIELDS,
)


def categorize_entry(name: str) -> EntryCategory:
    """
    Assign a display category from the entry name.

    Rules are tried in order; the first matching substring wins.
    "name" does not make an entry personal when the name also
    mentions "event" (eventName is an event field).
    """
    lower = name.lower()

    for category, needles in CATEGORY_RULES:
        for needle in needles:
            if needle not in lower:
                continue
            if category == EntryCategory.PERSONAL and needle == 'name' and 'event' in lower:
                continue
            return category

    return EntryCategory.OTHER


def is_important_entry(name: str) -> bool:
    """True for the fixed allow-list of headline fields."""
    return name in IMPORTANT_FIELDS


def category_rank(category: EntryCategory) -> int:
    """Sort position of a category."""
    return CATEGORY_ORDER.index(category)


def category_info(category: EntryCategory) -> dict[str, str]:
    """Icon and label for a category."""
    icon, label = CATEGORY_INFO.get(category, CATEGORY_INFO[EntryCategory.OTHER])
    return {'icon': icon, 'label': label}


__all__ = ['categorize_entry', 'is_important_entry', 'category_rank', 'category_info']
