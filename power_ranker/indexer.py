"""
Item indexer.

Maps item identifiers to dense matrix indices using a canonical ordering:
items sorted ascending by their natural ordering (lexicographic for strings).
The mapping depends only on the set's contents, never on insertion order.
"""

from collections.abc import Iterable, Sequence

from .exceptions import DimensionMismatchError, InvalidArgumentError
from .models import Item


class ItemIndexer:
    """Deterministic bijection between items and indices in [0, n)."""

    def __init__(self, items: Iterable[Item]):
        unique = set(items)
        try:
            ordered = sorted(unique)
        except TypeError as e:
            raise InvalidArgumentError(f"Items must be mutually comparable: {e}") from e

        self._items: tuple[Item, ...] = tuple(ordered)
        self._index: dict[Item, int] = {item: ix for ix, item in enumerate(self._items)}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    @property
    def items(self) -> tuple[Item, ...]:
        """Items in canonical index order."""
        return self._items

    def index_of(self, item: Item) -> int:
        """Return the matrix index of an item."""
        try:
            return self._index[item]
        except KeyError:
            raise InvalidArgumentError(f"Unknown item: {item!r}") from None

    def item_at(self, ix: int) -> Item:
        return self._items[ix]

    def label(self, values: Sequence[float]) -> dict[Item, float]:
        """Attach item labels to a vector indexed by matrix position."""
        if len(values) != len(self._items):
            raise DimensionMismatchError(
                f"Vector length {len(values)} does not match item count {len(self._items)}"
            )
        return {item: float(values[ix]) for ix, item in enumerate(self._items)}
