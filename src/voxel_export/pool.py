"""
Deduplicating record pool.

The pool keeps one append-only list per category plus a map from record key
to index. Indices are 1-based ordinals within a category and never change
once assigned, because records are never removed or reordered. Emitting
vertices, then normals, then faces is a walk over the lists in category
order, so no sort is needed afterwards.
"""

from typing import Dict, Iterator, List, Optional, Union

from .records import Category, Face, Normal, Vertex

Record = Union[Vertex, Normal, Face]


class RecordPool:
    """
    Insertion-ordered store of unique geometry records.

    Example:
        pool = RecordPool()
        a = pool.find_or_insert(Normal((0.0, 0.0, 1.0)))
        b = pool.find_or_insert(Normal((0.0, 0.0, 1.0)))
        assert a == b == 1
    """

    def __init__(self):
        self._records: Dict[Category, List[Record]] = {c: [] for c in Category}
        self._index: Dict[Category, Dict[bytes, int]] = {c: {} for c in Category}

    def find_or_insert(self, record: Record) -> int:
        """
        Return the index of `record`, inserting it if it is new.

        Args:
            record: Vertex, Normal or Face

        Returns:
            1-based index of the record within its category
        """
        category = record.category
        key = record.key
        index = self._index[category].get(key)
        if index is None:
            bucket = self._records[category]
            bucket.append(record)
            index = len(bucket)
            self._index[category][key] = index
        return index

    def index_of(self, record: Record) -> Optional[int]:
        """Index of an already stored record, or None."""
        return self._index[record.category].get(record.key)

    def count(self, category: Category) -> int:
        """Number of records stored in a category."""
        return len(self._records[category])

    def ordered(self, category: Category) -> Iterator[Record]:
        """Iterate records of one category in insertion order."""
        return iter(self._records[category])

    def records(self) -> Iterator[Record]:
        """Iterate all records: vertices, then normals, then faces."""
        for category in Category:
            yield from self._records[category]

    def __contains__(self, record: Record) -> bool:
        return self.index_of(record) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._records.values())

    def __repr__(self) -> str:
        return (
            f"RecordPool(vertices={self.count(Category.VERTEX)}, "
            f"normals={self.count(Category.NORMAL)}, "
            f"faces={self.count(Category.FACE)})"
        )
