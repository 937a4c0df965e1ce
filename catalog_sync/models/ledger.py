"""Ledger - SKUs already published, persisted between runs."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Ledger:
    """Set of processed SKUs bound to the JSON file it is persisted in.

    File shape: {"processed": ["sku-1", "sku-2", ...]}
    """

    path: Path
    processed: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.path = Path(self.path)
        self._index = set(self.processed)

    @classmethod
    def load(cls, path: Path | str) -> "Ledger":
        """
        Load the ledger from disk.

        A missing, unreadable or malformed file yields an empty ledger bound
        to the same path. The failure is logged, never raised.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            processed = data["processed"]
            if not isinstance(processed, list):
                raise ValueError(f"'processed' is a {type(processed).__name__}, expected a list")
        except FileNotFoundError:
            logger.info(f"No ledger at {path}, starting empty")
            return cls(path=path)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Could not read ledger {path} ({e}), starting empty")
            return cls(path=path)

        return cls(path=path, processed=[str(sku) for sku in processed])

    def is_processed(self, sku: str) -> bool:
        return sku in self._index

    def mark_processed(self, sku: str) -> None:
        """Record a SKU and rewrite the whole ledger file."""
        if sku not in self._index:
            self.processed.append(sku)
            self._index.add(sku)
        self.save()

    def save(self) -> None:
        """Write the full ledger via a temp file so a crash never truncates it."""
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            delete=False,
            dir=str(directory),
            prefix=f".{self.path.name}.",
            encoding="utf-8",
        ) as tf:
            json.dump({"processed": self.processed}, tf)
            tmp_name = tf.name
        os.replace(tmp_name, self.path)

    def __len__(self) -> int:
        return len(self.processed)
