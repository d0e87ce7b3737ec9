"""Selection store reader.

The selection store is a JSON array of selection records appended by the
viewer service. Only the most recent record is of interest here.
"""

import json
from pathlib import Path

from rebarfill.domain import ClickRecord
from rebarfill.exceptions import (
    MissingIdentifierError,
    SelectionStoreEmptyError,
    SelectionStoreUnavailableError,
)


class SelectionStore:
    """Read-only access to a file-backed selection store.

    Example:
        store = SelectionStore(Path("storage/clicks.json"))
        handle = store.last_external_id()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Path to the JSON selection file
        """
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[ClickRecord]:
        """Read all records in append order.

        Returns:
            List of selection records (possibly empty)

        Raises:
            SelectionStoreUnavailableError: If the file is missing, unreadable,
                or does not hold a JSON array of objects
        """
        if not self._path.is_file():
            raise SelectionStoreUnavailableError(str(self._path), "file not found")

        try:
            raw = self._path.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise SelectionStoreUnavailableError(str(self._path), str(e)) from e

        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SelectionStoreUnavailableError(str(self._path), f"invalid JSON: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise SelectionStoreUnavailableError(
                str(self._path), "expected a JSON array of selection records"
            )

        return [ClickRecord.from_dict(item) for item in data]

    def last(self) -> ClickRecord:
        """Return the most recently appended record.

        Raises:
            SelectionStoreUnavailableError: If the store cannot be read
            SelectionStoreEmptyError: If the store holds no records
        """
        records = self.load()
        if not records:
            raise SelectionStoreEmptyError(str(self._path))
        return records[-1]

    def last_external_id(self) -> str:
        """Return the external id of the most recent record.

        Raises:
            SelectionStoreUnavailableError: If the store cannot be read
            SelectionStoreEmptyError: If the store holds no records
            MissingIdentifierError: If the last record has a blank external id
        """
        record = self.last()
        if not record.external_id.strip():
            raise MissingIdentifierError(record.db_id)
        return record.external_id.strip()
