import unittest


class TestSupportCounting(unittest.TestCase):
    data = [["a", "b"], ["b", "c"], ["a", "b", "c"], ["b", "b"]]

    def test_count_support(self):
        from chatmine.freq_itemset import count_support
        self.assertEqual(count_support(["a", "b"], self.data), 2)
        self.assertEqual(count_support(["b"], self.data), 4)
        self.assertEqual(count_support(["d"], self.data), 0)
        self.assertEqual(count_support([], self.data), 4)

    def test_counter_consistent_with_definition(self):
        from chatmine.freq_itemset import count_support, SupportCounter, Itemset
        import numpy as np
        rs = np.random.RandomState(0)
        data = [list(rs.randint(0, 12, rs.randint(0, 7))) for _ in range(200)]
        counter = SupportCounter(data)
        for _ in range(50):
            itemset = Itemset(rs.randint(0, 14, rs.randint(1, 4)))
            self.assertEqual(counter.count(itemset), count_support(itemset, data))

    def test_counter_edge_cases(self):
        from chatmine.freq_itemset import SupportCounter, Itemset
        counter = SupportCounter(self.data)
        self.assertEqual(counter.n_transactions, 4)
        self.assertEqual(counter.count(Itemset()), 4)
        self.assertEqual(counter.count(Itemset(["a", "z"])), 0)
        self.assertEqual(counter.count_singletons(), {"a": 2, "b": 4, "c": 2})
        self.assertEqual(SupportCounter([]).count_singletons(), {})
        self.assertEqual(SupportCounter([[], []]).count(Itemset()), 2)

    def test_count_all(self):
        from chatmine.freq_itemset import SupportCounter, Itemset
        candidates = [Itemset(["b", "c"]), Itemset(["a", "b"]), Itemset(["a", "c"])]
        expected = {("b", "c"): 2, ("a", "b"): 2, ("a", "c"): 1}
        sequential = SupportCounter(self.data).count_all(candidates)
        parallel = SupportCounter(self.data, n_jobs=2).count_all(candidates)
        self.assertEqual(sequential, expected)
        self.assertEqual(parallel, expected)
        self.assertEqual(list(parallel), candidates)

    def test_cache(self):
        from chatmine.freq_itemset import SupportCounter, Itemset
        cache = {Itemset(["a"]): 100}
        counter = SupportCounter(self.data, cache=cache)
        self.assertEqual(counter.count(Itemset(["a"])), 100)
        self.assertEqual(counter.count(Itemset(["b", "c"])), 2)
        self.assertEqual(cache[Itemset(["b", "c"])], 2)


if __name__ == '__main__':
    unittest.main()
