"""
Frequent-pattern mining over conversation-turn keyword transactions.
"""
from .freq_itemset import APriori, mine

__all__ = [
    "APriori", "mine"
]
