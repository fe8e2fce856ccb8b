import logging
from typing import Dict, Iterable, Sequence

from models.bealert_model import REQUIRED_COLUMNS
from services.cell_service import cell_to_text
from services.errors import MissingColumnError

logger = logging.getLogger(__name__)


class ColumnResolver:
    """
    Maps XLSX header names to column positions.
    Lookups are always by name, so input column order does not matter.
    """

    @staticmethod
    def resolve(header_row: Iterable) -> Dict[str, int]:
        index: Dict[str, int] = {}
        for i, cell in enumerate(header_row):
            name = cell_to_text(cell).strip()
            if not name:
                continue
            if name in index:
                logger.debug("Duplicate header %r: column %d replaces %d", name, i, index[name])
            # last occurrence wins
            index[name] = i
        return index

    @staticmethod
    def require_columns(index: Dict[str, int], required: Sequence[str] = REQUIRED_COLUMNS) -> None:
        for name in required:
            if name not in index:
                raise MissingColumnError(name)

    @staticmethod
    def get(index: Dict[str, int], row: Sequence, name: str) -> str:
        pos = index.get(name)
        if pos is None or pos >= len(row):
            return ""
        return cell_to_text(row[pos]).strip()
