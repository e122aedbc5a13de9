import json
import logging
from typing import List, Optional, Sequence, Union

from gpacalc.config.settings import settings
from gpacalc.core.gpa import GpaResult, SemesterRow
from gpacalc.core.validation import apply_edit
from gpacalc.services.storage import Storage


logger = logging.getLogger(__name__)


class SemesterStoreError(Exception):
    pass


class SemesterStore:
    """
    Owns the semester list and keeps it written through to one storage key.
    Every mutation rewrites the whole serialized list; there is no buffering.
    """

    def __init__(self, storage: Storage, key: str = settings.storage_key) -> None:
        self.storage = storage
        self.key = key
        self._rows: List[SemesterRow] = []

    @classmethod
    def from_settings(cls) -> "SemesterStore":
        return cls(Storage(settings.db_path), settings.storage_key)

    @property
    def rows(self) -> List[SemesterRow]:
        return [SemesterRow(row.gpa, row.credit) for row in self._rows]

    def load(self) -> List[SemesterRow]:
        self._rows = self._read()
        return self.rows

    def _read(self) -> List[SemesterRow]:
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored semester list under %r is not valid JSON; starting empty", self.key)
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.warning("Stored semester list under %r has an unexpected shape; starting empty", self.key)
            return []
        return [SemesterRow.from_dict(item) for item in data]

    def replace(self, rows: Sequence[SemesterRow]) -> None:
        self._rows = [SemesterRow(row.gpa, row.credit) for row in rows]
        self.storage.set(self.key, json.dumps([row.to_dict() for row in self._rows]))

    def clear(self) -> None:
        self.storage.delete(self.key)
        self._rows = []
        logger.info("Cleared saved semesters under %r", self.key)

    def append(self, row: Optional[SemesterRow] = None) -> SemesterRow:
        row = row or SemesterRow()
        self.replace([*self._rows, row])
        return row

    def edit(self, index: int, field: str, value: Union[str, int, float]) -> SemesterRow:
        if not 0 <= index < len(self._rows):
            raise SemesterStoreError(f"No semester at position {index + 1}")
        updated = list(self._rows)
        updated[index] = apply_edit(updated[index], field, value)
        self.replace(updated)
        return updated[index]


def transfer(gpa_result: Optional[GpaResult], store: SemesterStore) -> Optional[SemesterRow]:
    if gpa_result is None:
        return None
    credit = gpa_result.total_credit
    row = SemesterRow(gpa=f"{gpa_result.gpa:.2f}", credit=int(credit) if credit.is_integer() else credit)
    store.append(row)
    logger.info("Transferred GPA %s over %s credits", row.gpa, row.credit)
    return row
