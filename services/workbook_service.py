import logging
import zipfile
from contextlib import contextmanager
from typing import Iterator, Tuple

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from services.errors import EmptyHeaderError, NoSheetError, WorkbookReadError

logger = logging.getLogger(__name__)

# Errors openpyxl lets through for missing, non-zip or malformed packages
OPEN_ERRORS = (OSError, InvalidFileException, zipfile.BadZipFile, KeyError)
# Errors while streaming sheet XML out of the package
READ_ERRORS = (OSError, zipfile.BadZipFile)


class WorkbookService:
    """
    Streams the first worksheet of an XLSX file.
    - Read-only mode: rows are decoded one at a time.
    - data_only: formula cells give their cached value.
    - Leading rows without any value are skipped; the first row with a
      value is the header.
    - Rows without any value after the last filled row are dropped.
    """

    @staticmethod
    @contextmanager
    def open_rows(path: str) -> Iterator[Tuple[tuple, Iterator[tuple]]]:
        try:
            wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
        except OPEN_ERRORS as e:
            raise WorkbookReadError(f"Cannot read XLSX: {e}") from e

        try:
            if not wb.worksheets:
                raise NoSheetError()
            ws = wb.worksheets[0]
            # Some exporters write a wrong <dimension>, let openpyxl scan the sheet
            ws.reset_dimensions()
            logger.debug("Reading sheet %r of %s", ws.title, path)

            rows = WorkbookService._guarded(ws.iter_rows(values_only=True))
            header = None
            for row in rows:
                if any(v is not None for v in row):
                    header = row
                    break
            if header is None:
                raise EmptyHeaderError()

            yield header, WorkbookService._drop_trailing_blank(rows)
        finally:
            wb.close()

    @staticmethod
    def _guarded(rows: Iterator[tuple]) -> Iterator[tuple]:
        try:
            for row in rows:
                yield row
        except READ_ERRORS as e:
            raise WorkbookReadError(f"Cannot read XLSX: {e}") from e

    @staticmethod
    def _drop_trailing_blank(rows: Iterator[tuple]) -> Iterator[tuple]:
        # Formatted but empty rows still come back as <row> elements; blank
        # rows are held until a filled row follows them.
        pending = []
        for row in rows:
            if any(v is not None for v in row):
                yield from pending
                pending.clear()
                yield row
            else:
                pending.append(row)
