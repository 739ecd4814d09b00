"""
Team label canonicalization.
"""

from typing import Optional

# Checked in order; the first side with a matching keyword wins.
_SIDE_KEYWORDS = (
    ("red", ("red", "attack", "enemy")),
    ("blue", ("blue", "cyan", "defend", "ally")),
    ("green", ("green",)),
    ("yellow", ("yellow",)),
)


def canonical_side(team: Optional[str]) -> str:
    """
    Map a free-text team label from the provider to a fixed side tag.

    Args:
        team: Label such as "Red", "Defenders" or "Blue/Cyan (Ally)"

    Returns:
        One of "red", "blue", "green", "yellow", "unknown"
    """
    label = (team or "").lower()
    for side, keywords in _SIDE_KEYWORDS:
        if any(keyword in label for keyword in keywords):
            return side
    return "unknown"
