"""
Support counting.

The support of an item-set is the number of transactions containing it as a subset.
    -> count_support() is the plain definition, scanning the transactions once.
    -> SupportCounter keeps a boolean incidence matrix (transactions x items), so that one count is a
       column selection and a row-wise AND. Counts within one level are independent of each other and
       can be fanned out across threads.
"""
from typing import Iterable, List, Hashable, Dict, FrozenSet, MutableMapping
import numpy as np
from joblib import Parallel, delayed

from .itemset import Itemset, to_transactions


__all__ = [
    "count_support", "SupportCounter"
]


def count_support(itemset: Iterable[Hashable], transactions: Iterable[Iterable[Hashable]]) -> int:
    """
    Count the transactions which contain every item of the item-set.
    An empty item-set is contained in every transaction.
    """
    items = set(itemset)
    return sum(1 for bucket in transactions if items.issubset(bucket))


class SupportCounter(object):
    """
    Support counting against one fixed collection of transactions.

    >> counter = SupportCounter([["a", "b"], ["b", "c"]])
    >> counter.count(Itemset(["b"]))
    2
    """
    def __init__(self, data: Iterable[Iterable[Hashable]], n_jobs: int=1,
                 cache: MutableMapping[Itemset, int]=None):
        """
        :param data: iterable<iterable<item>>, each inner iterable is a transaction.
        :param n_jobs: Number of threads used by count_all(). 1 means sequential, -1 means all cores.
        :param cache: Optional memo owned by the caller, dict<Itemset, support>.
            It is only valid for the same transactions; the counter never clears it.
        """
        self._transactions = to_transactions(data)
        self._n_jobs = n_jobs
        self._cache = cache
        self._index = self._build_index(self._transactions)
        self._matrix = self._build_matrix(self._transactions, self._index)

    @property
    def n_transactions(self) -> int:
        return len(self._transactions)

    @property
    def transactions(self) -> List[FrozenSet]:
        return self._transactions

    def count_singletons(self) -> Dict[Hashable, int]:
        """
        Support of every distinct item in one pass over the matrix columns.
        """
        column_sums = self._matrix.sum(axis=0)
        return {
            item: int(column_sums[idx]) for item, idx in self._index.items()
        }

    def count(self, itemset: Itemset) -> int:
        if self._cache is not None and itemset in self._cache:
            return self._cache[itemset]

        if len(itemset) == 0:
            support = self.n_transactions
        elif any(item not in self._index for item in itemset):
            support = 0
        else:
            columns = [self._index[item] for item in itemset]
            support = int(np.count_nonzero(self._matrix[:, columns].all(axis=1)))

        if self._cache is not None:
            self._cache[itemset] = support
        return support

    def count_all(self, candidates: List[Itemset]) -> Dict[Itemset, int]:
        """
        Count every candidate of one level. The result keeps the order of candidates.
        """
        if self._n_jobs == 1 or len(candidates) < 2:
            supports = [self.count(candidate) for candidate in candidates]
        else:
            supports = Parallel(n_jobs=self._n_jobs, prefer="threads")(
                delayed(self.count)(candidate) for candidate in candidates
            )
        return dict(zip(candidates, supports))

    @staticmethod
    def _build_index(transactions: List[FrozenSet]) -> Dict[Hashable, int]:
        index = dict()
        for bucket in transactions:
            for item in bucket:
                if item not in index:
                    index[item] = len(index)
        return index

    @staticmethod
    def _build_matrix(transactions: List[FrozenSet], index: Dict[Hashable, int]) -> np.ndarray:
        matrix = np.zeros((len(transactions), len(index)), dtype=bool)
        for row, bucket in enumerate(transactions):
            if not bucket:
                continue
            matrix[row, [index[item] for item in bucket]] = True
        return matrix
