import csv
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from models.bealert_model import (
    CSV_DELIMITER,
    CSV_ENCODING,
    CSV_LINE_TERMINATOR,
    PREVIEW_ROWS,
    REQUIRED_COLUMNS,
    ConversionResult,
)
from services.column_service import ColumnResolver
from services.errors import OutputWriteError
from services.record_service import RecordMapper
from services.workbook_service import WorkbookService

logger = logging.getLogger(__name__)


class ConversionController:
    """
    XLSX contact list -> BE-Alert CSV (";" separated, 33 columns).
    Every call opens its own workbook and output file; nothing is cached
    between validate_schema() and convert().
    """

    # =========================================================================
    #  VALIDATION
    # =========================================================================
    def validate_schema(self, input_path: str) -> Dict[str, int]:
        """Header-only check used right after picking the XLSX."""
        with WorkbookService.open_rows(input_path) as (header, _rows):
            index = self._resolve(header)
        logger.info("Columns OK in %s", input_path)
        return index

    def _resolve(self, header) -> Dict[str, int]:
        index = ColumnResolver.resolve(header)
        ColumnResolver.require_columns(index, REQUIRED_COLUMNS)
        logger.debug("Resolved columns: %s", {name: index[name] for name in REQUIRED_COLUMNS})
        return index

    # =========================================================================
    #  CONVERSION
    # =========================================================================
    def convert(self, input_path: str, output_path: str) -> ConversionResult:
        logger.info("Converting %s -> %s", input_path, output_path)
        result = ConversionResult(input_path, output_path)

        with WorkbookService.open_rows(input_path) as (header, rows):
            # Columns are checked before the output file is touched
            index = self._resolve(header)
            try:
                with open(output_path, "w", newline="", encoding=CSV_ENCODING) as f:
                    writer = csv.writer(f, delimiter=CSV_DELIMITER, lineterminator=CSV_LINE_TERMINATOR)
                    writer.writerow(RecordMapper.header())
                    for row in rows:
                        writer.writerow(RecordMapper.map_row(index, row))
                        result.rows_written += 1
                    f.flush()
            except OSError as e:
                raise OutputWriteError(f"Cannot write CSV: {e}") from e

        logger.info("Wrote %d rows to %s", result.rows_written, output_path)
        return result

    def preview(self, input_path: str, limit: int = PREVIEW_ROWS) -> Tuple[List[str], List[List[str]]]:
        """First `limit` mapped records, nothing written."""
        records = []
        with WorkbookService.open_rows(input_path) as (header, rows):
            index = self._resolve(header)
            for row in rows:
                if len(records) >= limit:
                    break
                records.append(RecordMapper.map_row(index, row))
        return RecordMapper.header(), records

    @staticmethod
    def suggest_output_name(input_path: str) -> str:
        stem = Path(input_path).stem if input_path else ""
        return f"{stem}.csv" if stem else "output.csv"
