"""
Turn mined item-sets into rows for display: the pattern, its support and the share of transactions
containing it, most supported first.
"""
from collections import namedtuple
import math
from typing import Iterable, List

from .apriori import FreqItemset


__all__ = [
    "PatternWithSupport", "pattern_report"
]

PatternWithSupport = namedtuple("PatternWithSupport", ["pattern", "support", "percentage"])


def pattern_report(frequent_itemsets: Iterable[FreqItemset], n_transactions: int) -> List[PatternWithSupport]:
    """
    :param frequent_itemsets: iterable<FreqItemset>, e.g. APriori(...).predict(data).frequent_itemsets()
    :param n_transactions: the number of mined transactions
    :return: list<PatternWithSupport>, sorted by support descending; ties keep the mining order.
    """
    rows = [
        PatternWithSupport(pattern=list(items), support=freq,
                           percentage=_percentage(freq, n_transactions))
        for items, freq in frequent_itemsets
    ]
    return sorted(rows, key=lambda row: row.support, reverse=True)


def _percentage(support: int, n_transactions: int) -> int:
    if n_transactions <= 0:
        return 0
    # round half up
    return int(math.floor(support * 100 / n_transactions + 0.5))
