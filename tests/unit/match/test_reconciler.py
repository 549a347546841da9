"""Tests for greedy list reconciliation."""

import pytest

from lrm.errors import ConfigurationError
from lrm.match import Algorithm, MatchOptions, reconcile


def assert_partition(result, list1, list2):
    """Every index of both lists is either matched exactly once or left over."""
    first = sorted([m.index1 for m in result.matches] + result.only_in_first_indices)
    second = sorted([m.index2 for m in result.matches] + result.only_in_second_indices)
    assert first == list(range(len(list1)))
    assert second == list(range(len(list2)))
    assert result.only_in_first == [list1[i] for i in result.only_in_first_indices]
    assert result.only_in_second == [list2[j] for j in result.only_in_second_indices]
    for m in result.matches:
        assert list1[m.index1] == m.item1
        assert list2[m.index2] == m.item2


def opts(algorithm, ignore_case=True, threshold=80.0):
    return MatchOptions(algorithm=algorithm, ignore_case=ignore_case, threshold=threshold)


class TestExact:

    def test_basic_partition(self):
        list1 = ["Apple", "Banana", "Cherry"]
        list2 = ["banana", "apple", "Date"]
        result = reconcile(list1, list2)

        assert [(m.item1, m.item2) for m in result.matches] == [("Apple", "apple"), ("Banana", "banana")]
        assert result.only_in_first == ["Cherry"]
        assert result.only_in_second == ["Date"]
        assert all(m.similarity is None for m in result.matches)
        assert_partition(result, list1, list2)

    def test_ignore_case_boundary(self):
        list1 = ["Apple", "Banana"]
        list2 = ["banana", "apple"]

        folded = reconcile(list1, list2, opts("exact", ignore_case=True))
        assert len(folded.matches) == 2
        assert folded.only_in_first == [] and folded.only_in_second == []

        strict = reconcile(list1, list2, opts("exact", ignore_case=False))
        assert strict.matches == []
        assert strict.only_in_first == list1
        assert strict.only_in_second == list2

    def test_case_sensitive_still_trims(self):
        result = reconcile([" Apple", "Pear"], ["Apple ", "pear"], opts("exact", ignore_case=False))
        assert [(m.index1, m.index2) for m in result.matches] == [(0, 0)]
        assert result.only_in_first == ["Pear"]
        assert result.only_in_second == ["pear"]

    def test_duplicates_are_matched_one_to_one(self):
        list1 = ["a", "a", "b"]
        list2 = ["a", "c"]
        result = reconcile(list1, list2)

        assert [(m.index1, m.index2) for m in result.matches] == [(0, 0)]
        assert result.only_in_first == ["a", "b"]
        assert result.only_in_first_indices == [1, 2]
        assert result.only_in_second == ["c"]
        assert result.only_in_second_indices == [1]

    def test_first_fit_takes_lowest_free_index(self):
        result = reconcile(["x", "x"], ["x", "y", "x"])
        assert [(m.index1, m.index2) for m in result.matches] == [(0, 0), (1, 2)]

    def test_matches_carry_alignment_of_original_strings(self):
        result = reconcile(["  Apple"], ["APPLE"])
        pair = result.matches[0]
        assert pair.alignment is not None
        assert "".join(c.char for c in pair.alignment.first) == "  Apple"
        assert "".join(c.char for c in pair.alignment.second) == "APPLE"


class TestSoundex:

    def test_first_fit_within_bucket(self):
        list1 = ["Smith", "Smyth"]
        list2 = ["Smythe", "Smith"]
        result = reconcile(list1, list2, opts("soundex"))
        assert [(m.index1, m.index2) for m in result.matches] == [(0, 0), (1, 1)]
        assert_partition(result, list1, list2)

    def test_items_without_letters_never_match(self):
        result = reconcile(["123", "Robert"], ["123", "Rupert"], opts("soundex"))
        assert [(m.item1, m.item2) for m in result.matches] == [("Robert", "Rupert")]
        assert result.only_in_first == ["123"]
        assert result.only_in_second == ["123"]

    def test_different_codes_stay_unmatched(self):
        result = reconcile(["Robert"], ["Ashcraft"], opts("soundex"))
        assert result.matches == []


class TestScored:

    def test_greedy_claim_is_never_revisited(self):
        list1 = ["Jonathon", "Jonathan"]
        list2 = ["Jonathan"]
        result = reconcile(list1, list2, opts("levenshtein"))

        assert len(result.matches) == 1
        pair = result.matches[0]
        assert (pair.index1, pair.index2) == (0, 0)
        assert pair.similarity == pytest.approx(87.5)
        assert result.only_in_first == ["Jonathan"]

    def test_tie_keeps_lowest_second_index(self):
        result = reconcile(["cat"], ["bat", "hat"], opts("levenshtein", threshold=60))
        assert result.matches[0].item2 == "bat"
        assert result.only_in_second == ["hat"]

    def test_best_score_wins_over_earlier_candidate(self):
        result = reconcile(["Jonathan"], ["Jonathon", "jonathan"], opts("levenshtein"))
        assert result.matches[0].index2 == 1
        assert result.matches[0].similarity == 100.0

    def test_below_threshold_is_rejected(self):
        # kitten/sitting scores 57.14
        result = reconcile(["kitten"], ["sitting"], opts("levenshtein", threshold=58))
        assert result.matches == []
        result = reconcile(["kitten"], ["sitting"], opts("levenshtein", threshold=57))
        assert len(result.matches) == 1

    def test_threshold_zero_never_accepts_zero_similarity(self):
        result = reconcile(["abc"], ["xyz"], opts("levenshtein", threshold=0))
        assert result.matches == []
        assert result.only_in_first == ["abc"]
        assert result.only_in_second == ["xyz"]

    def test_threshold_zero_accepts_any_positive_score(self):
        # "abc" / "axy" share one character: 33.33
        result = reconcile(["abc"], ["xyz", "axy"], opts("levenshtein", threshold=0))
        assert [(m.index1, m.index2) for m in result.matches] == [(0, 1)]
        assert result.matches[0].similarity == pytest.approx(100 / 3)

    def test_threshold_hundred_requires_identity(self):
        result = reconcile(["Apple", "Pear"], ["apple", "Pears"], opts("jaro-winkler", threshold=100))
        assert [(m.item1, m.item2) for m in result.matches] == [("Apple", "apple")]

    def test_jaro_winkler_prefix_bonus_is_small(self):
        # Jaro 94.44 plus a prefix bonus of under half a point
        result = reconcile(["MARTHA"], ["MARHTA"], opts("jaro-winkler", threshold=95))
        assert result.matches == []
        result = reconcile(["MARTHA"], ["MARHTA"], opts("jaro-winkler", threshold=94.4))
        assert result.matches[0].similarity == pytest.approx(94.461, abs=1e-3)

    def test_token_sort_pairs_reordered_names(self):
        result = reconcile(["Doe, Jane", "Smith John"], ["john smith", "jane doe,"], opts("token-sort"))
        assert sorted((m.index1, m.index2) for m in result.matches) == [(0, 1), (1, 0)]

    def test_damerau_accepts_transposition(self):
        result = reconcile(["abcdef"], ["abcdfe"], opts("damerau-levenshtein"))
        assert result.matches[0].similarity == pytest.approx(500 / 6)
        result = reconcile(["abcdef"], ["abcdfe"], opts("levenshtein"))
        assert result.matches == []


@pytest.mark.parametrize("algorithm", list(Algorithm))
class TestAllAlgorithms:

    def test_empty_first_list(self, algorithm):
        result = reconcile([], ["a", "b"], opts(algorithm))
        assert result.matches == []
        assert result.only_in_first == []
        assert result.only_in_second == ["a", "b"]
        assert result.only_in_second_indices == [0, 1]

    def test_empty_second_list(self, algorithm):
        result = reconcile(["a"], [], opts(algorithm))
        assert result.matches == []
        assert result.only_in_first == ["a"]
        assert result.only_in_second == []

    def test_both_empty(self, algorithm):
        result = reconcile([], [], opts(algorithm))
        assert result.to_dict() == {"matches": [], "only_in_first": [], "only_in_second": []}

    def test_partition_holds(self, algorithm):
        list1 = ["Robert", "Jonathan", "New York", "robert", "", "Zed"]
        list2 = ["Rupert", "York New", "Jonathon", "Robert", "Alpha", ""]
        result = reconcile(list1, list2, opts(algorithm, threshold=70))
        assert_partition(result, list1, list2)
        assert len(result.matches) <= min(len(list1), len(list2))

    def test_repeatable(self, algorithm):
        list1 = ["Robert", "Jonathan", "Jon"]
        list2 = ["John", "Rupert", "Jonathon"]
        first = reconcile(list1, list2, opts(algorithm))
        second = reconcile(list1, list2, opts(algorithm))
        assert first.to_dict() == second.to_dict()

    def test_identical_lists_fully_match(self, algorithm):
        items = ["Alpha", "Beta", "Gamma"]
        result = reconcile(items, list(items), opts(algorithm))
        assert [(m.index1, m.index2) for m in result.matches] == [(0, 0), (1, 1), (2, 2)]
        assert all(m.algorithm is algorithm for m in result.matches)


class TestOptions:

    def test_defaults(self):
        options = MatchOptions()
        assert options.algorithm is Algorithm.EXACT
        assert options.ignore_case is True
        assert options.threshold == 80.0

    def test_algorithm_tag_is_parsed(self):
        assert MatchOptions(algorithm="JARO_WINKLER").algorithm is Algorithm.JARO_WINKLER

    @pytest.mark.parametrize("threshold", [-1, 100.5, "80", True, None])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(ConfigurationError):
            MatchOptions(algorithm="levenshtein", threshold=threshold)

    def test_unknown_algorithm(self):
        with pytest.raises(ConfigurationError, match="Unknown algorithm"):
            MatchOptions(algorithm="nysiis")

    def test_to_dict_rounds_similarity(self):
        result = reconcile(["kitten"], ["sitting"], opts("levenshtein", threshold=50))
        assert result.to_dict()["matches"] == [{
            "item1": "kitten",
            "item2": "sitting",
            "index1": 0,
            "index2": 0,
            "algorithm": "levenshtein",
            "similarity": 57.14,
        }]
