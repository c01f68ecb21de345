# app/schemas/category.py
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class MeetingCategory(str, Enum):
    """
    Fixed set of meeting types used in the imported workbooks.

    Values are the exact Arabic labels found in the category column.
    """

    PRAYER_REST = "الصلاة - الراحة"
    INTERNATIONAL_EVENTS = "المؤتمرات والفعاليات الدولية"
    MULTILATERAL = "الاجتماعات متعددة الأطراف"
    BILATERAL = "الاجتماعات الثنائية"
    LOCAL_EVENTS = "الفعاليات والرحلات المحلية"
    TOURISM = "اجتماعات السياحة"
    COMMITTEES = "اجتماعات اللجان والمجالس"
    PRIVATE_SECTOR_INTERNATIONAL = "القطاع الخاص (دولي)"
    PRIVATE_SECTOR_LOCAL = "القطاع الخاص (محلي)"
    OTHER = "اجتماعات أخرى"
    HOLIDAYS = "العطلات"


class CategoryColor(BaseModel):
    """
    Display colors bound to a meeting category.
    """

    model_config = ConfigDict(frozen=True)

    primary: str = Field(
        ...,
        description="Main hex color used for the meeting block.",
        examples=["#039BD4"],
    )
    background: str = Field(
        ...,
        description="Light hex tint of the primary color for card backgrounds.",
        examples=["#D9F0F9"],
    )


def _tint(hex_color: str, amount: float = 0.85) -> str:
    """
    Mix `hex_color` with white. `amount` is the share of white (0..1).
    """
    value = hex_color.lstrip("#")
    channels = [int(value[i : i + 2], 16) for i in (0, 2, 4)]
    mixed = [round(c + (255 - c) * amount) for c in channels]
    return "#" + "".join(f"{c:02X}" for c in mixed)


def _pair(primary: str) -> CategoryColor:
    return CategoryColor(primary=primary, background=_tint(primary))


_PRIMARY_COLORS = {
    MeetingCategory.PRAYER_REST: "#5D7070",
    MeetingCategory.INTERNATIONAL_EVENTS: "#C8EEFD",
    MeetingCategory.MULTILATERAL: "#039BD4",
    MeetingCategory.BILATERAL: "#032059",
    MeetingCategory.LOCAL_EVENTS: "#4CB480",
    MeetingCategory.TOURISM: "#3B876A",
    MeetingCategory.COMMITTEES: "#338F92",
    MeetingCategory.PRIVATE_SECTOR_INTERNATIONAL: "#4D4785",
    MeetingCategory.PRIVATE_SECTOR_LOCAL: "#7484A9",
    MeetingCategory.OTHER: "#334C4C",
    MeetingCategory.HOLIDAYS: "#B0B0B0",
}

# Read-only after import; nothing in the import or layout path mutates it.
CATEGORY_COLORS: Mapping[MeetingCategory, CategoryColor] = MappingProxyType(
    {category: _pair(primary) for category, primary in _PRIMARY_COLORS.items()}
)

# Neutral fallback for category text that is not in the table.
DEFAULT_CATEGORY_COLOR = _pair("#3F3F46")


def resolve_category(text: object) -> Optional[MeetingCategory]:
    """
    Map raw category cell text to a MeetingCategory.

    Surrounding whitespace is ignored. Unknown or empty text returns None.
    """
    if text is None or isinstance(text, bool):
        return None
    label = str(text).strip()
    if not label:
        return None
    try:
        return MeetingCategory(label)
    except ValueError:
        return None


def color_for(category: Optional[MeetingCategory]) -> CategoryColor:
    if category is None:
        return DEFAULT_CATEGORY_COLOR
    return CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR)


# Colors picked for meetings added by hand (they carry no category).
MANUAL_PALETTE: tuple[CategoryColor, ...] = tuple(
    _pair(primary)
    for primary in (
        "#365314",
        "#1E3A8A",
        "#78350F",
        "#064E3B",
        "#4C1D95",
        "#881337",
        "#164E63",
    )
)
