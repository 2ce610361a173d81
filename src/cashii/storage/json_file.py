"""JSON file storage."""

import json
import logging
import os
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

from cashii.domain.entities import Ledger
from cashii.domain.errors import StorageError
from cashii.storage.base import LedgerStorage
from cashii.storage.mappers import ledger_from_dict, ledger_to_dict

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    # Amounts a double cannot hold exactly are written as numeric strings
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        if Decimal(repr(float(value))) == value:
            return float(value)
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONFileStorage(LedgerStorage):
    """Ledger stored as a single JSON document."""

    def __init__(self, path: Union[str, Path]):
        """Initialize JSON file storage.

        Args:
            path: Location of the ledger file
        """
        self.path = Path(path)

    def load(self) -> Ledger:
        """Load the ledger, or an empty one if the file does not exist.

        Raises:
            StorageError: If the file cannot be read or is not valid JSON
        """
        if not self.path.exists():
            logger.debug("No ledger at %s, starting empty", self.path)
            return Ledger()

        try:
            text = self.path.read_text(encoding="utf-8")
            document = json.loads(text, parse_float=Decimal)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Could not read ledger '{self.path}': {e}") from e

        ledger = ledger_from_dict(document)
        logger.debug("Loaded %d transactions from %s", len(ledger.transactions), self.path)
        return ledger

    def save(self, ledger: Ledger) -> None:
        """Overwrite the ledger file atomically.

        The document is written to a temporary file next to the target and
        moved into place, so readers see either the old or the new ledger.

        Raises:
            StorageError: If the file cannot be written
        """
        text = json.dumps(ledger_to_dict(ledger), default=_json_default, indent=2)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(text)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not write ledger '{self.path}': {e}") from e

        logger.debug("Saved %d transactions to %s", len(ledger.transactions), self.path)
