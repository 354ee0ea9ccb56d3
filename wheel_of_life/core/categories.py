"""Life categories assessed by the Wheel of Life.

The set is fixed and ordered. The enumeration order is significant: it is the
tie-break order when two categories have the same priority score.
"""

from typing import Literal

# =========================
# Categories
# =========================

LifeCategory = Literal[
    "health",
    "relationships",
    "romance",
    "personal",
    "fun",
    "community",
    "career",
    "finances",
]

LIFE_CATEGORIES: tuple[LifeCategory, ...] = (
    "health",
    "relationships",
    "romance",
    "personal",
    "fun",
    "community",
    "career",
    "finances",
)

LIFE_CATEGORY_LABELS: dict[LifeCategory, str] = {
    "health": "Health & Fitness",
    "relationships": "Friends & Family",
    "romance": "Romance / Love Life",
    "personal": "Personal Development",
    "fun": "Fun & Recreation",
    "community": "Community & Contribution",
    "career": "Career / Business",
    "finances": "Finances",
}

CATEGORY_INDEX: dict[LifeCategory, int] = {c: i for i, c in enumerate(LIFE_CATEGORIES)}

# =========================
# Ratings
# =========================

MIN_RATING = 1
MAX_RATING = 10

# Unanswered categories are scored as lowest satisfaction, lowest motivation.
DEFAULT_RATING = MIN_RATING


def category_label(category: LifeCategory) -> str:
    """Human-readable label for a category."""
    return LIFE_CATEGORY_LABELS[category]
