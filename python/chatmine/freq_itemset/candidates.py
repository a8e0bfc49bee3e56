"""
Candidate generation and subset pruning.

Both steps work on canonical item-sets (see itemset.Itemset):
    -> Join: two frequent (k-1)-sets with the same first k-2 items, where the first one has the smaller last
       item, produce the k-set made of the first set followed by the last item of the second one.
       In the sorted level, item-sets sharing a prefix are adjacent and already ordered by their last item,
       so every candidate is produced exactly once.
    -> Prune: a k-set is dropped unless all its k subsets of size k-1 are frequent (monotonicity).
       Nothing is counted here, only the frequent (k-1)-sets are consulted.
"""
from typing import Iterable, List, Collection

from .itemset import Itemset


__all__ = [
    "generate_candidates", "prune_candidates"
]


def generate_candidates(frequent_prev_set: Iterable[Itemset], set_length: int) -> List[Itemset]:
    """
    :param frequent_prev_set: the frequent item-sets of size set_length - 1
    :param set_length: the length of candidate sets
    :return: list<Itemset>, distinct candidates in canonical order
    """
    frequent_prev_set = sorted(set(frequent_prev_set))
    candidates = list()

    if set_length == 2:
        for idx, setA in enumerate(frequent_prev_set[:-1]):
            for setB in frequent_prev_set[idx + 1:]:
                candidates.append(setA.union(setB))
        return candidates

    for idx, setA in enumerate(frequent_prev_set[:-1]):
        for setB in frequent_prev_set[idx + 1:]:
            if setA.prefix != setB.prefix:
                break
            if setA.last < setB.last:
                candidates.append(Itemset(setA + (setB.last,)))
    return candidates


def prune_candidates(candidates: Iterable[Itemset], frequent_prev_set: Collection[Itemset],
                     set_length: int) -> List[Itemset]:
    """
    Keep the candidates whose immediate subsets are all frequent.
    Pairs are returned unchanged: their subsets are frequent items by construction.
    """
    if set_length <= 2:
        return list(candidates)

    if not isinstance(frequent_prev_set, (set, frozenset, dict)):
        frequent_prev_set = set(frequent_prev_set)

    return [
        candidate for candidate in candidates
        if all(subset in frequent_prev_set for subset in candidate.subsets())
    ]
