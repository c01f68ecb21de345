# tests/test_category.py
import pytest

from app.schemas.category import (
    CATEGORY_COLORS,
    DEFAULT_CATEGORY_COLOR,
    MANUAL_PALETTE,
    MeetingCategory,
    color_for,
    resolve_category,
)


def test_every_category_has_a_color():
    assert set(CATEGORY_COLORS) == set(MeetingCategory)


def test_category_table_is_read_only():
    with pytest.raises(TypeError):
        CATEGORY_COLORS[MeetingCategory.OTHER] = DEFAULT_CATEGORY_COLOR  # type: ignore[index]


def test_background_is_a_light_tint_of_primary():
    color = CATEGORY_COLORS[MeetingCategory.MULTILATERAL]

    assert color.primary == "#039BD4"
    assert color.background == "#D9F0F9"


def test_resolve_known_label_ignores_surrounding_whitespace():
    assert resolve_category("  الاجتماعات الثنائية ") == MeetingCategory.BILATERAL


@pytest.mark.parametrize("value", [None, "", "   ", "Bilateral", True, 42])
def test_resolve_unknown_values(value):
    assert resolve_category(value) is None


def test_color_for_falls_back_to_default():
    assert color_for(None) == DEFAULT_CATEGORY_COLOR
    assert color_for(MeetingCategory.HOLIDAYS).primary == "#B0B0B0"


def test_manual_palette_is_distinct_from_category_colors():
    primaries = {c.primary for c in CATEGORY_COLORS.values()}

    assert len(MANUAL_PALETTE) == 7
    assert not primaries & {c.primary for c in MANUAL_PALETTE}
