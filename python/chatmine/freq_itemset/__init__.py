"""
This module is to find frequent item-sets with given support value.
    -> The input is like:
    [
        [itemA, itemB, ...],
        [itemA, itemC, ...],
        ...
    ]
    Each inner list is a bucket (the keywords of one conversation turn).

    -> The output result is a list of item-sets, smaller sizes first:
    [
        Itemset([itemA]), Itemset([itemB]), ..., Itemset([itemA, itemB]), ...
    ]

    The item-set is presented in Itemset, a sorted tuple of distinct items.
"""

from .itemset import Itemset, to_transaction, to_transactions
from .support import count_support, SupportCounter
from .candidates import generate_candidates, prune_candidates
from .apriori import APriori, FreqItemset, mine
from .report import PatternWithSupport, pattern_report

__all__ = [
    "Itemset", "to_transaction", "to_transactions",
    "count_support", "SupportCounter",
    "generate_candidates", "prune_candidates",
    "APriori", "FreqItemset", "mine",
    "PatternWithSupport", "pattern_report"
]
