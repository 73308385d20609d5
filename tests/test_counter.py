"""Tests for the zero-pruning Counter used as Multiset storage."""

from counter import Counter


class TestMissing:
    def test_missing_key_reads_zero(self):
        c = Counter({"a": 1})
        assert c["b"] == 0
        # Reading does not insert
        assert "b" not in c

    def test_total(self):
        assert Counter({"a": 2, "b": 3}).total() == 5
        assert Counter().total() == 0


class TestArithmetic:
    def test_add(self):
        assert Counter({"a": 1, "b": 2}) + Counter({"b": 1, "c": 4}) == {
            "a": 1,
            "b": 3,
            "c": 4,
        }

    def test_or_takes_max(self):
        assert Counter({"a": 1, "b": 5}) | Counter({"a": 3, "c": 1}) == {
            "a": 3,
            "b": 5,
            "c": 1,
        }

    def test_and_keeps_shared_keys(self):
        assert Counter({"a": 1, "b": 5}) & Counter({"b": 2, "c": 1}) == {"b": 2}

    def test_sub_drops_non_positive(self):
        assert Counter({"a": 3, "b": 1}) - Counter({"a": 1, "b": 1, "c": 2}) == {
            "a": 2
        }

    def test_operands_are_not_modified(self):
        left, right = Counter({"a": 1}), Counter({"a": 2})
        result = left + right
        result["a"] = 10
        assert left == {"a": 1}
        assert right == {"a": 2}

    def test_results_are_counters(self):
        assert isinstance(Counter({"a": 1}) | Counter(), Counter)
        assert isinstance(Counter({"a": 1}) - Counter(), Counter)
