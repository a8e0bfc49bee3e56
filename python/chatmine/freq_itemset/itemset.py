"""
Itemset value type.

An item-set is kept in its canonical form: distinct items sorted in ascending order.
Equality, hashing and ordering are those of the sorted tuple, so two item-sets built from
the same items in any order (or with repeats) are the same item-set.
"""
from typing import Iterable, List, Hashable, FrozenSet, Tuple


__all__ = [
    "Itemset", "to_transaction", "to_transactions"
]


class Itemset(tuple):
    """
    A canonically sorted tuple of distinct items.

    >> Itemset(["b", "a", "b"])
    ('a', 'b')
    """
    __slots__ = ()

    def __new__(cls, items: Iterable[Hashable]=()):
        return super().__new__(cls, sorted(set(items)))

    def __repr__(self):
        return "Itemset({0})".format(list(self))

    @property
    def prefix(self) -> Tuple:
        """
        All items except the last one.
        """
        return tuple(self[:-1])

    @property
    def last(self) -> Hashable:
        return self[-1]

    def subsets(self) -> List["Itemset"]:
        """
        The k immediate subsets (size k-1) of a k-size item-set, in canonical order.
        """
        return [
            Itemset(self[:idx] + self[idx + 1:])
            for idx in range(len(self) - 1, -1, -1)
        ]

    def issubset(self, transaction: FrozenSet) -> bool:
        return all(item in transaction for item in self)

    def union(self, other: Iterable[Hashable]) -> "Itemset":
        return Itemset(tuple(self) + tuple(other))


def to_transaction(bucket: Iterable[Hashable]) -> FrozenSet:
    """
    Collapse duplicated items; the order inside a bucket is irrelevant.
    """
    return frozenset(bucket)


def to_transactions(data: Iterable[Iterable[Hashable]]) -> List[FrozenSet]:
    return [to_transaction(bucket) for bucket in data]
