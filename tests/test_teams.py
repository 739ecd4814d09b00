import pytest

from app.utils.teams import canonical_side


@pytest.mark.parametrize("label,side", [
    ("Red", "red"),
    ("Attackers", "red"),
    ("Red/Enemy", "red"),
    ("Blue", "blue"),
    ("CYAN", "blue"),
    ("Defender", "blue"),
    ("Ally", "blue"),
    ("Green", "green"),
    ("yellow team", "yellow"),
    ("Purple", "unknown"),
    ("", "unknown"),
    (None, "unknown"),
])
def test_canonical_side(label, side):
    assert canonical_side(label) == side


def test_red_keywords_checked_first():
    # "Red" wins over "Defender" when both appear
    assert canonical_side("Red (Defenders)") == "red"
