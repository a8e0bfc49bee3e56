"""
Example of A-Priori Algorithm on conversation keywords.

    python frequent_itemset.py [support] [bucket file]

The bucket file holds one transaction per line, items separated by commas.
Without a file, a small sample of physics chat keywords is mined.
"""
from chatmine.freq_itemset import APriori, FreqItemset, pattern_report
import logging
import os
import time
import sys


SAMPLE_CHAT_DATA = [
    ["energy", "kinetic", "mechanics"],
    ["potential", "energy", "work"],
    ["energy", "kinetic", "motion"],
    ["forces", "mechanics", "energy"],
    ["work", "energy", "potential"],
]


class DataPrepare(object):
    def __init__(self, path=None):
        self.path = path
        self.iterable = self.read_data() if path is not None else SAMPLE_CHAT_DATA

    def read_data(self):
        if not os.path.exists(self.path):
            raise FileNotFoundError("The bucket file {0} doesn't exist.".format(self.path))
        with open(self.path, "r") as file:
            iterable = [
                [item.strip() for item in line.strip().split(",") if item.strip()]
                for line in file if line.strip()
            ]
        return iterable

    def __len__(self):
        return len(self.iterable)

    def __iter__(self):
        yield from self.iterable


class Configuration(object):
    def __init__(self, input_path):
        self.input_path = input_path
        self.start_time = time.time()

    def __call__(self, func):
        def run(*args, **kwargs):
            start = time.time()
            func(self.start_time, self.input_path, *args, **kwargs)
            end = time.time()
            print("Duration:", (end - start))
        return run


def model(start_time, input_path, Model, **kwargs):
    data = DataPrepare(input_path)
    freq_itemsets = list()
    for idx, itemsets in enumerate(Model(**kwargs).iter_levels(data)):
        print("Pass{0} finished, {1} frequent item-sets, duration = {2}".format(
            idx + 1, len(itemsets), time.time() - start_time))
        freq_itemsets.extend([
            FreqItemset(items=items, freq=freq) for items, freq in itemsets.items()
        ])

    for row in pattern_report(freq_itemsets, len(data)):
        print("({0}) support={1} ({2}%)".format(",".join(row.pattern), row.support, row.percentage))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    support = int(sys.argv[1]) if len(sys.argv) > 1 else 2
    path = sys.argv[2] if len(sys.argv) > 2 else None
    conf = Configuration(input_path=path)
    conf(model)(Model=APriori, support=support)
