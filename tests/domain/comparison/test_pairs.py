import pytest
from domain.comparison.pairs import enumerate_pairs


class TestEnumeratePairs:
    @pytest.mark.parametrize("n", [0, 1, 2, 3, 6, 10])
    def test_pair_count(self, n):
        pairs = list(enumerate_pairs(range(1, n + 1)))
        assert len(pairs) == n * (n - 1) // 2

    def test_no_self_pairs(self):
        assert all(a != b for a, b in enumerate_pairs([4, 8, 15, 16, 23, 42]))

    def test_each_unordered_pair_once(self):
        pairs = list(enumerate_pairs([4, 8, 15, 16, 23, 42]))
        unordered = {frozenset(pair) for pair in pairs}
        assert len(unordered) == len(pairs)

    def test_follows_iteration_order(self):
        assert list(enumerate_pairs([3, 1, 2])) == [(3, 1), (3, 2), (1, 2)]

    def test_sorted_input(self):
        assert list(enumerate_pairs(sorted([3, 1, 2]))) == [(1, 2), (1, 3), (2, 3)]

    def test_duplicate_ids(self):
        with pytest.raises(ValueError):
            list(enumerate_pairs([1, 2, 1]))
