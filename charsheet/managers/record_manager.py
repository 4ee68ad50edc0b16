"""Persistence of record lists as JSON documents."""

import json
import logging
from pathlib import Path
from typing import Generic, List, Type, TypeVar, Union

from ..errors import (
    MalformedRecordError, PersistenceError, RecordNotFoundError, RulesInvariantError
)
from ..models.base import SerializableModel


logger = logging.getLogger(__name__)

T = TypeVar('T', bound=SerializableModel)


class RecordManager(Generic[T]):
    """Loads and saves lists of one record type.

    Subclasses set ``record_type`` and ``default_filename``.
    """

    record_type: Type[T]
    default_filename: str = "records.json"

    def __init__(self, data_directory: Path = None):
        """Initialize record manager.

        Args:
            data_directory: Directory that relative document paths resolve against
        """
        self.data_dir = Path(data_directory) if data_directory else Path("data")

    def _resolve(self, path: Union[str, Path, None]) -> Path:
        """Resolve a document path against the data directory."""
        return self.data_dir / Path(path or self.default_filename)

    def save(self, records: List[T], path: Union[str, Path, None] = None) -> Path:
        """Write records to a document, replacing any previous contents.

        Args:
            records: Records to save
            path: Document path, relative to the data directory

        Returns:
            Path the document was written to

        Raises:
            PersistenceError: If the document cannot be written
        """
        filepath = self._resolve(path)
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with filepath.open('w', encoding='utf-8') as f:
                json.dump(
                    [record.to_dict() for record in records],
                    f,
                    indent=2,
                    ensure_ascii=False
                )
        except OSError as e:
            logger.error(f"Failed to save {self.record_type.__name__} records to {filepath}: {e}")
            raise PersistenceError(f"Cannot write {filepath}: {e}") from e

        logger.info(f"Saved {len(records)} {self.record_type.__name__} record(s) to {filepath}")
        return filepath

    def load(self, path: Union[str, Path, None] = None) -> List[T]:
        """Read records from a document.

        Args:
            path: Document path, relative to the data directory

        Returns:
            Records in document order

        Raises:
            RecordNotFoundError: If the document does not exist
            MalformedRecordError: If the document does not hold the expected records
            PersistenceError: If the document cannot be read
        """
        filepath = self._resolve(path)
        if not filepath.exists():
            logger.error(f"Record file not found: {filepath}")
            raise RecordNotFoundError(f"No such document: {filepath}")

        try:
            with filepath.open('r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise TypeError(f"expected a list of records, got {type(data).__name__}")
            records = [self.record_type.from_dict(item) for item in data]
        except OSError as e:
            logger.error(f"Failed to read {self.record_type.__name__} records from {filepath}: {e}")
            raise PersistenceError(f"Cannot read {filepath}: {e}") from e
        except (ValueError, KeyError, TypeError, AttributeError, RulesInvariantError) as e:
            logger.error(f"Failed to load {self.record_type.__name__} records from {filepath}: {e}")
            raise MalformedRecordError(f"{filepath} is not a valid document: {e}") from e

        logger.info(f"Loaded {len(records)} {self.record_type.__name__} record(s) from {filepath}")
        return records

    def exists(self, path: Union[str, Path, None] = None) -> bool:
        """Check if a document exists."""
        return self._resolve(path).exists()

    def list_documents(self) -> List[str]:
        """List document names in the data directory."""
        if not self.data_dir.exists():
            return []
        return sorted(p.name for p in self.data_dir.glob("*.json"))
