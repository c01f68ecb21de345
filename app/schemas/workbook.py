# app/schemas/workbook.py
from typing import Dict, List, Union

from pydantic import BaseModel, Field

from app.services.workbook import GridWorkbook

JsonCell = Union[bool, int, float, str, None]


class WorkbookPayload(BaseModel):
    """
    An already-decoded workbook sent over HTTP.

    Each sheet is a row-major grid of cell values. Date cells may be day
    serials or DD/MM/YYYY strings; time cells may be fractions of a day or
    H:MM strings. `null` marks an undefined cell.
    """

    sheets: Dict[str, List[List[JsonCell]]] = Field(
        ...,
        description="Sheet name -> rows of cell values (zero-based, row-major).",
        examples=[
            {
                "Data": [
                    ["جدول الاجتماعات"],
                    ["الخميس", "الأربعاء", "الثلاثاء", "الاثنين", "الأحد"],
                    [],
                    [1, "الاجتماعات الثنائية", "اجتماع تنسيقي", "أحمد", 45000, 0.375, 0.5, "القاعة 3", "نعم"],
                ]
            }
        ],
    )

    def to_workbook(self) -> GridWorkbook:
        return GridWorkbook.from_rows(self.sheets)


class ImportPreview(BaseModel):
    """
    Display-ready view of the first rows of a workbook, before importing.
    """

    day_labels: List[str] = Field(
        ...,
        description="Day-name labels from the header row, left-to-right.",
    )
    rows: List[List[str]] = Field(
        ...,
        description=(
            "First non-empty body rows as text, with serial dates rendered as "
            "DD/MM/YYYY and time fractions as 12-hour labels."
        ),
    )
    total_rows: int = Field(
        ...,
        description="Number of non-empty body rows found in the sheet.",
        examples=[12],
    )
