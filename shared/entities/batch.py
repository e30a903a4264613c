import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, TypeVar

from app.core.errors import DecodeError

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class DecodedBatch(Generic[T]):
    """Rows that decoded cleanly, plus the ids of those that did not."""

    items: List[T] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)


def decode_rows(rows: Iterable[Any], decode: Callable[[Any], T]) -> DecodedBatch[T]:
    """
    Decode every row independently. A row whose decode raises is skipped and
    logged; the listing continues with the remaining rows.
    """
    batch: DecodedBatch[T] = DecodedBatch()
    for row in rows:
        try:
            batch.items.append(decode(row))
        except DecodeError as e:
            row_id = str(getattr(row, "id", None))
            logger.warning(f"Skipping undecodable row {row_id}: {e.message}")
            batch.skipped.append(row_id)
    return batch
