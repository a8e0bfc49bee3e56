"""
A-Priori Algorithm:
    Level-wise search for frequent item-sets in conversation-turn transactions.
    -> Monotonicity: an item-set can be frequent only if all of its subsets are frequent.

    Pass1:
        -> Count occurrence of each item.
        -> Filter out all frequent items.
    Pass2:
        -> Join every two frequent items into a candidate pair.
        -> Count pairs.
        -> Filter out all frequent pairs.
    Pass3 or more:
        -> Join frequent (k-1)-sets sharing their first k-2 items.
        -> Prune candidates with an infrequent (k-1)-subset.
        -> Count the remaining candidates.
        -> Filter out all frequent k-sets.
    Stop when a pass finds no frequent item-set.

>> from chatmine.freq_itemset import APriori
>> apriori = APriori(support=2)
>> frequent_itemsets = apriori.predict(iterable<list<item>>).frequent_itemsets()
"""
from collections import namedtuple
import logging
from typing import Iterable, List, Hashable, Dict, MutableMapping

from .itemset import Itemset
from .support import SupportCounter
from .candidates import generate_candidates, prune_candidates


__all__ = [
    "APriori", "FreqItemset", "mine"
]

logger = logging.getLogger(__name__)

FreqItemset = namedtuple("FreqItemset", ["items", "freq"])


class APriori(object):
    """
    In-memory implementation of A-Priori Algorithm.
    The object keeps no state between two calls except the result of the last predict().
    """
    def __init__(self, support: int, max_set_size: int=float("inf"), n_jobs: int=1,
                 support_cache: MutableMapping[Itemset, int]=None):
        """
        :param support: The threshold of frequent itemset. Values <= 0 make every combination frequent.
        :param max_set_size: Maximum size of Item-sets.
        :param n_jobs: Number of threads counting the candidates of one level.
        :param support_cache: Optional memo dict<Itemset, support> owned by the caller,
            to be reused only with the same transactions (e.g. re-mining with another support).
        """
        if max_set_size < 1:
            raise ValueError("max_set_size should be at least 1, but {0} is given.".format(max_set_size))
        if n_jobs == 0:
            raise ValueError("n_jobs should be a positive integer or a negative one like -1.")
        self._support = support
        self._max_set_size = max_set_size
        self._n_jobs = n_jobs
        self._support_cache = support_cache
        self._freq_itemsets = None

    def predict(self, data: Iterable[Iterable[Hashable]]) -> "APriori":
        """
        Mine all levels (up to max_set_size) and keep the frequent item-sets.
        """
        freq_itemsets = list()
        for item_sets in self.iter_levels(data):
            freq_itemsets.extend([
                FreqItemset(items=items, freq=freq) for items, freq in item_sets.items()
            ])
        self._freq_itemsets = freq_itemsets
        return self

    def frequent_itemsets(self) -> List[FreqItemset]:
        return self._freq_itemsets

    def count(self, data: Iterable[Iterable[Hashable]]) -> Dict[int, Dict[Itemset, int]]:
        """
        :return: dict<length of frequent set, dict<frequent set, frequency>>
        """
        return {
            idx + 1: item_sets for idx, item_sets in enumerate(self.iter_levels(data))
        }

    def iter_levels(self, data: Iterable[Iterable[Hashable]]) -> Iterable[Dict[Itemset, int]]:
        """
        Yield the frequent item-sets level by level, as dict<Itemset, support>.
        The caller may stop iterating at any level; later levels are never computed.
        """
        counter = SupportCounter(data, n_jobs=self._n_jobs, cache=self._support_cache)

        item_sets = self._first_pass_count_singletons(counter)
        set_length = 1
        while len(item_sets) > 0:
            yield item_sets
            set_length += 1
            if set_length > self._max_set_size:
                return
            item_sets = self._other_passes_count_pairs_or_more(counter=counter,
                                                               frequent_prev_set=item_sets,
                                                               set_length=set_length)

    def _first_pass_count_singletons(self, counter: SupportCounter) -> Dict[Itemset, int]:
        count_map = counter.count_singletons()
        frequent_items = {
            Itemset([item]): count_map[item]
            for item in sorted(count_map) if count_map[item] >= self._support
        }
        logger.debug("Pass 1: %d distinct items, %d frequent", len(count_map), len(frequent_items))
        return frequent_items

    def _other_passes_count_pairs_or_more(self, counter: SupportCounter,
                                          frequent_prev_set: Dict[Itemset, int],
                                          set_length: int) -> Dict[Itemset, int]:
        candidates = generate_candidates(frequent_prev_set, set_length)
        survivors = prune_candidates(candidates, frequent_prev_set, set_length)
        count_map = counter.count_all(survivors)

        frequent_next_set = {
            key: val for key, val in count_map.items() if val >= self._support
        }
        logger.debug("Pass %d: %d candidates, %d after pruning, %d frequent",
                     set_length, len(candidates), len(survivors), len(frequent_next_set))
        return frequent_next_set


def mine(transactions: Iterable[Iterable[Hashable]], min_support: int,
         max_set_size: int=float("inf"), n_jobs: int=1) -> List[Itemset]:
    """
    Every item-set contained in at least min_support transactions, smaller sizes first.
    An empty list means no frequent pattern, it is not an error.
    """
    apriori = APriori(support=min_support, max_set_size=max_set_size, n_jobs=n_jobs)
    return [
        freq_itemset.items for freq_itemset in apriori.predict(transactions).frequent_itemsets()
    ]
