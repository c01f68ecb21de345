# app/services/workbook_parser.py
from __future__ import annotations

import logging
import uuid
from datetime import timedelta
from enum import IntEnum
from typing import Callable, List, Optional, Sequence, Tuple

from app.schemas.category import color_for, resolve_category
from app.schemas.meeting import UNTITLED_MEETING, ImportResult, MeetingRecord
from app.schemas.workbook import ImportPreview
from app.services.cell_decoders import (
    at_minutes,
    cell_text,
    decode_date_cell,
    decode_pending_flag,
    decode_slot_index,
    decode_time_cell,
    fraction_to_minutes,
    is_blank,
    is_number,
    serial_to_date,
    text_or_not_available,
)
from app.services.formatting import SLOT_MINUTES, format_date_dmy, format_minutes_ar
from app.services.workbook import CellValue, Row, Workbook, Worksheet

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Data"

# Zero-based sheet coordinates. Row 2 holds the day labels, meetings start
# on row 4 (one-based, as shown by spreadsheet tools).
HEADER_ROW_INDEX = 1
FIRST_BODY_ROW_INDEX = 3
FIRST_BODY_ROW_NUMBER = FIRST_BODY_ROW_INDEX + 1
DAY_LABEL_COUNT = 5


class ImportColumn(IntEnum):
    """
    Zero-based column positions of the meeting table.

    Column 0 is a running number and columns 9-10 are unused.
    """

    CATEGORY = 1
    TITLE = 2
    ORGANIZER = 3
    DATE = 4
    START_TIME = 5
    END_TIME = 6
    LOCATION = 7
    PENDING = 8
    START_SLOT = 11
    END_SLOT = 12


# A row must reach the end-time column to be importable.
MIN_ROW_COLUMNS = ImportColumn.END_TIME + 1


class WorkbookImportError(ValueError):
    """
    Base class for failures that abort a whole workbook import.
    """


class MissingSheetError(WorkbookImportError):
    def __init__(self, sheet_name: str) -> None:
        self.sheet_name = sheet_name
        super().__init__(f'Sheet "{sheet_name}" was not found in the workbook.')


class RowShapeError(WorkbookImportError):
    def __init__(self, row_number: int, column_count: int) -> None:
        self.row_number = row_number
        self.column_count = column_count
        super().__init__(
            f"Invalid data in row {row_number}: expected at least {MIN_ROW_COLUMNS} "
            f"columns, found {column_count}."
        )


class InvalidDateError(WorkbookImportError):
    def __init__(self, row_number: int, value: CellValue) -> None:
        self.row_number = row_number
        self.value = value
        super().__init__(
            f"Invalid date format in row {row_number}: {value!r} is neither a "
            "date serial nor a DD/MM/YYYY string."
        )


def _has_value(row: Sequence[CellValue]) -> bool:
    return any(not is_blank(cell) for cell in row)


def _cell(row: Sequence[CellValue], column: int) -> CellValue:
    return row[column] if column < len(row) else None


def _default_id_factory() -> Callable[[int], str]:
    batch = uuid.uuid4().hex[:8]
    return lambda index: f"import-{batch}-{index}"


class WorkbookImportParser:
    """
    Converts the meeting sheet of a decoded workbook into MeetingRecords.

    Rules
    -----
    - The sheet must exist, otherwise MissingSheetError.
    - Day labels come from A2:E2, which reads right-to-left; they are
      reversed into left-to-right order. Missing cells become "".
    - Body rows start at row 4. Rows without any non-empty cell are skipped
      and do not count towards row numbers in error messages.
    - A non-empty row shorter than MIN_ROW_COLUMNS raises RowShapeError.
    - An undecodable date raises InvalidDateError. A single bad row fails
      the whole batch.
    - Undecodable times are tolerated and leave the time at midnight.

    Notes
    -----
    - The parser holds no state between calls. A fresh id factory is built
      per call unless one was injected.
    """

    def __init__(
        self,
        sheet_name: str = DEFAULT_SHEET_NAME,
        id_factory: Optional[Callable[[int], str]] = None,
    ) -> None:
        self.sheet_name = sheet_name
        self._id_factory = id_factory

    def parse(self, workbook: Workbook) -> ImportResult:
        sheet = self.get_sheet(workbook)
        day_labels = self.read_day_labels(sheet)
        make_id = self._id_factory or _default_id_factory()

        records: List[MeetingRecord] = []
        for index, row in enumerate(self.body_rows(sheet)):
            row_number = index + FIRST_BODY_ROW_NUMBER
            records.append(self._parse_row(row, row_number, make_id(index)))

        logger.info(
            "Imported %d meetings from sheet %r", len(records), self.sheet_name
        )
        return ImportResult(records=records, day_labels=day_labels)

    def get_sheet(self, workbook: Workbook) -> Worksheet:
        if self.sheet_name not in workbook.sheet_names:
            logger.warning(
                "Workbook has no %r sheet (found: %s)",
                self.sheet_name,
                ", ".join(workbook.sheet_names) or "none",
            )
            raise MissingSheetError(self.sheet_name)
        return workbook.sheet(self.sheet_name)

    @staticmethod
    def read_day_labels(sheet: Worksheet) -> List[str]:
        labels = [cell_text(sheet.cell(HEADER_ROW_INDEX, col)) for col in range(DAY_LABEL_COUNT)]
        labels.reverse()
        return labels

    @staticmethod
    def body_rows(sheet: Worksheet) -> List[Row]:
        return [row for row in sheet.rows(FIRST_BODY_ROW_INDEX) if _has_value(row)]

    def _parse_row(self, row: Row, row_number: int, meeting_id: str) -> MeetingRecord:
        if len(row) < MIN_ROW_COLUMNS:
            raise RowShapeError(row_number, len(row))

        date_value = _cell(row, ImportColumn.DATE)
        try:
            meeting_date = decode_date_cell(date_value)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(row_number, date_value) from exc

        start_time = at_minutes(meeting_date, decode_time_cell(_cell(row, ImportColumn.START_TIME)))
        end_time = at_minutes(meeting_date, decode_time_cell(_cell(row, ImportColumn.END_TIME)))
        if end_time <= start_time:
            logger.warning(
                "Row %d ends at or before its start (%s >= %s); using one %d-minute slot",
                row_number,
                start_time.time(),
                end_time.time(),
                SLOT_MINUTES,
            )
            end_time = start_time + timedelta(minutes=SLOT_MINUTES)

        start_slot, end_slot = self._slot_pair(row, row_number)

        category_value = _cell(row, ImportColumn.CATEGORY)
        category = resolve_category(category_value)
        if category is None and not is_blank(category_value):
            logger.debug("Unknown category %r in row %d", category_value, row_number)

        title_value = _cell(row, ImportColumn.TITLE)
        title = UNTITLED_MEETING if is_blank(title_value) else cell_text(title_value)

        return MeetingRecord(
            id=meeting_id,
            title=title,
            date=meeting_date,
            start_time=start_time,
            end_time=end_time,
            description=text_or_not_available(category_value),
            organizer=text_or_not_available(_cell(row, ImportColumn.ORGANIZER)),
            location=text_or_not_available(_cell(row, ImportColumn.LOCATION)),
            category=category,
            color=color_for(category),
            is_pending=decode_pending_flag(_cell(row, ImportColumn.PENDING)),
            start_slot_index=start_slot,
            end_slot_index=end_slot,
        )

    @staticmethod
    def _slot_pair(row: Row, row_number: int) -> Tuple[Optional[int], Optional[int]]:
        start = decode_slot_index(_cell(row, ImportColumn.START_SLOT))
        end = decode_slot_index(_cell(row, ImportColumn.END_SLOT))

        # Slots are 1-based.
        start = start if start is not None and start >= 1 else None
        end = end if end is not None and end >= 1 else None

        if start is not None and end is not None and end < start:
            logger.warning(
                "Row %d has end slot %d before start slot %d; ignoring slots",
                row_number,
                end,
                start,
            )
            return None, None
        return start, end


def parse_workbook(
    workbook: Workbook,
    sheet_name: str = DEFAULT_SHEET_NAME,
    id_factory: Optional[Callable[[int], str]] = None,
) -> ImportResult:
    """
    Convenience wrapper around WorkbookImportParser.parse().
    """
    return WorkbookImportParser(sheet_name=sheet_name, id_factory=id_factory).parse(workbook)


def _preview_cell(value: CellValue, column: int) -> str:
    if is_number(value):
        if column == ImportColumn.DATE:
            try:
                return format_date_dmy(serial_to_date(value))  # type: ignore[arg-type]
            except OverflowError:
                return cell_text(value)
        if column in (ImportColumn.START_TIME, ImportColumn.END_TIME):
            minutes = fraction_to_minutes(value)  # type: ignore[arg-type]
            if minutes is not None:
                return format_minutes_ar(minutes)
    return cell_text(value)


def build_import_preview(
    workbook: Workbook,
    limit: int = 2,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> ImportPreview:
    """
    Format the first `limit` non-empty body rows for display.

    Only the sheet lookup can fail here; row shape and dates are checked
    by the real import.
    """
    parser = WorkbookImportParser(sheet_name=sheet_name)
    sheet = parser.get_sheet(workbook)
    rows = parser.body_rows(sheet)

    preview_rows = [
        [_preview_cell(value, column) for column, value in enumerate(row[: ImportColumn.PENDING])]
        for row in rows[: max(limit, 0)]
    ]
    return ImportPreview(
        day_labels=parser.read_day_labels(sheet),
        rows=preview_rows,
        total_rows=len(rows),
    )
