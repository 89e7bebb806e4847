"""Tests for frequency analysis."""

import pytest

from scytale.core.exceptions import InvalidArgumentError
from scytale.models.schemas import ReportKind
from scytale.services.analysis.frequency import (
    NGRAM_PAD,
    count_characters,
    count_ngrams,
    count_words,
)


def rows(report):
    return [(row.unit, row.count) for row in report.rows]


class TestCountCharacters:
    """Character counts are ordered by character."""

    def test_simple(self):
        report = count_characters("aab")
        assert report.kind == ReportKind.CHARACTERS
        assert rows(report) == [("a", 2), ("b", 1)]
        assert report.to_text() == "a,2\nb,1\n"

    def test_includes_spaces_and_punctuation(self):
        assert rows(count_characters("b a!")) == [(" ", 1), ("!", 1), ("a", 1), ("b", 1)]

    def test_case_sensitive(self):
        assert rows(count_characters("aA")) == [("A", 1), ("a", 1)]

    def test_empty(self):
        report = count_characters("")
        assert len(report) == 0
        assert report.to_text() == ""


class TestCountWords:
    """Word counts are ordered by ascending count."""

    def test_simple(self):
        report = count_words("a a b")
        assert report.kind == ReportKind.WORDS
        assert rows(report) == [("b", 1), ("a", 2)]
        assert report.to_text() == "b,1\na,2\n"

    def test_ties_keep_first_appearance(self):
        assert rows(count_words("the cat the hat")) == [("cat", 1), ("hat", 1), ("the", 2)]

    def test_splits_on_single_space_only(self):
        assert rows(count_words("a\tb c")) == [("a\tb", 1), ("c", 1)]
        assert rows(count_words("a  b")) == [("a", 1), ("", 1), ("b", 1)]

    def test_punctuation_stays_attached(self):
        assert count_words("hi hi, hi").as_dict() == {"hi,": 1, "hi": 2}

    def test_empty(self):
        assert rows(count_words("")) == [("", 1)]


class TestCountNgrams:
    """N-gram counts include padded edges."""

    def test_bigrams_padded(self):
        report = count_ngrams("ab", 2)
        assert report.kind == ReportKind.NGRAMS
        assert report.ngram_length == 2
        assert rows(report) == [(NGRAM_PAD + "a", 1), ("ab", 1), ("b" + NGRAM_PAD, 1)]

    def test_sorted_by_count(self):
        assert rows(count_ngrams("aaa", 2)) == [
            (NGRAM_PAD + "a", 1),
            ("a" + NGRAM_PAD, 1),
            ("aa", 2),
        ]

    def test_unigrams_not_padded(self):
        assert rows(count_ngrams("abca", 1)) == [("b", 1), ("c", 1), ("a", 2)]

    def test_total_count(self):
        """Padding yields len(text) + length - 1 n-grams."""
        report = count_ngrams("hello", 3)
        assert sum(row.count for row in report.rows) == 7
        assert report.as_dict()[NGRAM_PAD * 2 + "h"] == 1
        assert report.as_dict()["o" + NGRAM_PAD * 2] == 1

    def test_length_longer_than_text(self):
        report = count_ngrams("ab", 4)
        assert sum(row.count for row in report.rows) == 5
        assert all(len(row.unit) == 4 for row in report.rows)

    def test_custom_pad(self):
        assert count_ngrams("ab", 2, pad="_").as_dict() == {"_a": 1, "ab": 1, "b_": 1}

    def test_render(self):
        assert count_ngrams("ab", 2, pad="_").to_text() == "_a,1\nab,1\nb_,1\n"

    def test_empty_text(self):
        assert len(count_ngrams("", 3)) == 0

    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_length(self, length):
        with pytest.raises(InvalidArgumentError) as exc_info:
            count_ngrams("abc", length)
        assert exc_info.value.details["length"] == length

    def test_invalid_pad(self):
        with pytest.raises(InvalidArgumentError):
            count_ngrams("abc", 2, pad="--")
