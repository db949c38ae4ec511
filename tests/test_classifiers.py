"""Tests for app.models.classifier — token classification and aggregation."""

import itertools
from unittest.mock import patch

import pytest

from app.domain.enums import TokenCategory
from app.models.classifier import (
    INTERNAL_ERROR_MESSAGE,
    categorize_token,
    classify,
    letter_sort_key,
    token_text,
)


class TestTokenText:
    def test_string_is_trimmed(self):
        assert token_text("  a \t") == "a"

    def test_integer(self):
        assert token_text(42) == "42"

    def test_integral_float_drops_fraction(self):
        assert token_text(4.0) == "4"

    def test_fractional_float(self):
        assert token_text(2.5) == "2.5"

    def test_booleans_and_null(self):
        assert token_text(True) == "true"
        assert token_text(False) == "false"
        assert token_text(None) == "null"

    def test_nested_values_render_as_json(self):
        assert token_text([1, 2]) == "[1,2]"
        assert token_text({"a": 1}) == '{"a":1}'

    def test_browser_whitespace_is_trimmed(self):
        assert token_text("\ufeff5") == "5"
        assert token_text("\u3000a\u2003\u00a0") == "a"
        assert token_text("\u20285\u2029") == "5"

    def test_control_separators_are_kept(self):
        assert token_text("\x1c5\x1f") == "\x1c5\x1f"
        assert token_text("\x85a") == "\x85a"

    def test_huge_integer(self):
        assert token_text(10 ** 5000) == "1" + "0" * 5000
        assert token_text(-(10 ** 5000)) == "-1" + "0" * 5000


class TestCategorizeToken:
    @pytest.mark.parametrize("text", ["0", "7", "007", "123456789012345678901234567890"])
    def test_numeric(self, text):
        assert categorize_token(text) is TokenCategory.NUMERIC

    @pytest.mark.parametrize("text", ["a", "Z"])
    def test_letter(self, text):
        assert categorize_token(text) is TokenCategory.LETTER

    @pytest.mark.parametrize("text", ["$", "ab", "-5", "3.14", "a1", "é", "٣", "true"])
    def test_special(self, text):
        assert categorize_token(text) is TokenCategory.SPECIAL

    def test_empty_is_dropped(self):
        assert categorize_token("") is None


class TestLetterSortKey:
    def test_uppercase_before_lowercase(self):
        assert letter_sort_key("Z") < letter_sort_key("a")

    def test_same_case_is_lexicographic(self):
        assert letter_sort_key("a") < letter_sort_key("b")
        assert letter_sort_key("A") < letter_sort_key("B")

    def test_order_is_consistent_for_mixed_triples(self):
        letters = ["b", "A", "a", "C", "B", "c"]
        expected = ["A", "B", "C", "a", "b", "c"]
        for perm in itertools.permutations(letters):
            assert sorted(perm, key=letter_sort_key) == expected


class TestClassifyScenarios:
    def test_basic_mix(self):
        result = classify({"data": ["a", "1", "23", "$", "B"]})
        assert result.is_success is True
        assert result.odd_numbers == ["1", "23"]
        assert result.even_numbers == []
        assert result.alphabets == ["B", "a"]
        assert result.special_characters == ["$"]
        assert result.sum == "24"
        assert result.concat_string == "Ba"

    def test_even_numbers(self):
        result = classify({"data": ["2", "4", "z", "Z", "@", "6"]})
        assert result.odd_numbers == []
        assert result.even_numbers == ["2", "4", "6"]
        assert result.sum == "12"
        assert result.alphabets == ["Z", "z"]
        assert result.special_characters == ["@"]

    def test_alphabet_sorting(self):
        result = classify({"data": ["x", "5", "y", "11", "#", "3", "Z", "A"]})
        assert result.alphabets == ["A", "Z", "x", "y"]
        assert result.concat_string == "AZxy"
        assert result.odd_numbers == ["5", "11", "3"]
        assert result.sum == "19"

    def test_leading_zeros_are_canonicalized(self):
        result = classify({"data": ["007", "010"]})
        assert result.odd_numbers == ["7"]
        assert result.even_numbers == ["10"]
        assert result.sum == "17"

    def test_numeric_json_values(self):
        result = classify({"data": [1, 2, 3.0, " 4 "]})
        assert result.odd_numbers == ["1", "3"]
        assert result.even_numbers == ["2", "4"]
        assert result.sum == "10"

    def test_negative_and_decimal_numbers_are_special(self):
        result = classify({"data": ["-5", "3.14", -2, 1.5]})
        assert result.special_characters == ["-5", "3.14", "-2", "1.5"]
        assert result.sum == "0"

    def test_blank_tokens_are_dropped(self):
        result = classify({"data": ["", "   ", "\n", "a"]})
        assert result.alphabets == ["a"]
        assert result.special_characters == []

    def test_multi_character_words_are_special(self):
        result = classify({"data": ["ab", "hello", "A"]})
        assert result.special_characters == ["ab", "hello"]
        assert result.alphabets == ["A"]

    def test_duplicates_are_kept(self):
        result = classify({"data": ["a", "a", "1", "1", "$", "$"]})
        assert result.alphabets == ["a", "a"]
        assert result.odd_numbers == ["1", "1"]
        assert result.special_characters == ["$", "$"]
        assert result.sum == "2"

    def test_large_numbers_do_not_overflow(self):
        big = "9" * 30
        result = classify({"data": [big, "1"]})
        assert result.sum == str(int(big) + 1)

    def test_numbers_beyond_int_conversion_limit(self):
        long_odd = "1" * 5000
        result = classify({"data": [long_odd, "2"]})
        assert result.is_success is True
        assert result.odd_numbers == [long_odd]
        assert result.even_numbers == ["2"]
        assert result.sum == "1" * 4999 + "3"

    def test_long_numbers_carry_and_lose_leading_zeros(self):
        result = classify({"data": ["000" + "9" * 9000, "1"]})
        assert result.odd_numbers == ["9" * 9000, "1"]
        assert result.sum == "1" + "0" * 9000

    def test_byte_order_mark_is_trimmed_before_classifying(self):
        result = classify({"data": ["\ufeff5", "\x1ca"]})
        assert result.odd_numbers == ["5"]
        assert result.special_characters == ["\x1ca"]

    def test_tuple_data_is_accepted(self):
        result = classify({"data": ("a", "2")})
        assert result.is_success is True
        assert result.even_numbers == ["2"]


class TestClassifyEmptyInput:
    @pytest.mark.parametrize("payload", [{"data": []}, {}])
    def test_empty_or_missing_data(self, payload):
        result = classify(payload)
        assert result.is_success is True
        assert result.odd_numbers == []
        assert result.even_numbers == []
        assert result.alphabets == []
        assert result.special_characters == []
        assert result.sum == "0"
        assert result.concat_string == ""
        assert result.error is None


class TestClassifyFailures:
    @pytest.mark.parametrize("data", ["not an array", 42, {"a": 1}, None, True])
    def test_non_array_data(self, data):
        result = classify({"data": data})
        assert result.is_success is False
        assert result.error == "Input data must be an array"
        assert result.odd_numbers == []
        assert result.even_numbers == []
        assert result.alphabets == []
        assert result.special_characters == []
        assert result.sum == "0"
        assert result.concat_string == ""

    @pytest.mark.parametrize("payload", [["a", "1"], "data", None])
    def test_non_object_payload(self, payload):
        result = classify(payload)
        assert result.is_success is False
        assert result.error == "Input must be a JSON object"

    def test_unexpected_fault_hides_detail(self):
        with patch("app.models.classifier._aggregate", side_effect=RuntimeError("boom")):
            result = classify({"data": ["a"]})
        assert result.is_success is False
        assert result.error == INTERNAL_ERROR_MESSAGE

    def test_unexpected_fault_with_debug_shows_detail(self):
        with patch("app.models.classifier._aggregate", side_effect=RuntimeError("boom")):
            result = classify({"data": ["a"]}, debug=True)
        assert result.is_success is False
        assert "boom" in result.error


class TestClassifyInvariants:
    SAMPLES = [
        ["a", "1", "23", "$", "B"],
        ["x", "5", "y", "11", "#", "3", "Z", "A"],
        ["007", "b", "B", " ", "", "%%", "42", 8, 9.0, "q", "Q"],
        [],
    ]

    @pytest.mark.parametrize("tokens", SAMPLES)
    def test_every_token_lands_in_one_category(self, tokens):
        result = classify({"data": tokens})
        non_empty = [t for t in tokens if token_text(t)]
        assert (
            result.number_count
            + len(result.alphabets)
            + len(result.special_characters)
        ) == len(non_empty)

    @pytest.mark.parametrize("tokens", SAMPLES)
    def test_parity_split_and_sum(self, tokens):
        result = classify({"data": tokens})
        assert all(int(n) % 2 == 1 for n in result.odd_numbers)
        assert all(int(n) % 2 == 0 for n in result.even_numbers)
        odd_sum = sum(int(n) for n in result.odd_numbers)
        even_sum = sum(int(n) for n in result.even_numbers)
        assert str(odd_sum + even_sum) == result.sum

    @pytest.mark.parametrize("tokens", SAMPLES)
    def test_concat_matches_alphabets(self, tokens):
        result = classify({"data": tokens})
        assert "".join(result.alphabets) == result.concat_string

    def test_letter_order_is_idempotent(self):
        result = classify({"data": ["c", "B", "a", "A", "b", "C"]})
        resorted = classify({"data": result.alphabets})
        assert resorted.alphabets == result.alphabets

    def test_letter_order_ignores_input_permutation(self):
        letters = ["q", "Q", "b", "A", "z"]
        outputs = {
            tuple(classify({"data": list(perm)}).alphabets)
            for perm in itertools.permutations(letters)
        }
        assert outputs == {("A", "Q", "b", "q", "z")}

    def test_first_seen_order_within_categories(self):
        result = classify({"data": ["9", "#", "4", "!", "1", "2", "@"]})
        assert result.odd_numbers == ["9", "1"]
        assert result.even_numbers == ["4", "2"]
        assert result.special_characters == ["#", "!", "@"]
