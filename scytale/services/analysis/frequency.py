import logging
from collections import Counter
from collections.abc import Iterable, Iterator

from scytale.core.exceptions import InvalidArgumentError
from scytale.models.schemas import FrequencyReport, FrequencyRow, ReportKind

logger = logging.getLogger(__name__)

# U+2060 WORD JOINER marks positions before the start / after the end of text
NGRAM_PAD = "\u2060"

WORD_SEPARATOR = " "


def count_characters(text: str) -> FrequencyReport:
    """
    Count every distinct character, including spaces and punctuation.

    Rows are sorted by character (code point order).

    Args:
        text: Text to analyze

    Returns:
        FrequencyReport of character counts
    """
    counter = Counter(text)
    rows = [
        FrequencyRow(unit=char, count=count)
        for char, count in sorted(counter.items())
    ]
    return FrequencyReport(kind=ReportKind.CHARACTERS, rows=rows)


def count_words(text: str) -> FrequencyReport:
    """
    Count tokens separated by a single ASCII space.

    Only ``" "`` separates words: tabs and newlines stay inside tokens and
    consecutive spaces produce empty tokens. Rows are sorted by ascending
    count; equal counts keep the order in which tokens first appear.

    Args:
        text: Text to analyze

    Returns:
        FrequencyReport of word counts
    """
    return _by_count(ReportKind.WORDS, text.split(WORD_SEPARATOR))


def count_ngrams(text: str, length: int, pad: str = NGRAM_PAD) -> FrequencyReport:
    """
    Count n-grams of ``length`` characters, including padded edge n-grams.

    The text is padded with ``length - 1`` pad characters on each side
    before sliding the window, so every character starts and ends an
    n-gram. For "ab" and length 2 the n-grams are pad + "a", "ab" and
    "b" + pad. Rows are sorted by ascending count, ties in first-appearance
    order.

    Args:
        text: Text to analyze
        length: Window size, at least 1
        pad: Single padding character

    Returns:
        FrequencyReport of n-gram counts

    Raises:
        InvalidArgumentError: If length is less than 1 or pad is not one character
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidArgumentError(
            f"N-gram length must be a positive integer, got {length!r}",
            {"length": length},
        )
    if len(pad) != 1:
        raise InvalidArgumentError(
            f"N-gram pad must be a single character, got {pad!r}",
            {"pad": pad},
        )

    report = _by_count(ReportKind.NGRAMS, _ngrams(text, length, pad), ngram_length=length)
    logger.debug("Counted %d distinct %d-grams", len(report), length)
    return report


def _ngrams(text: str, length: int, pad: str) -> Iterator[str]:
    if not text:
        return
    padding = pad * (length - 1)
    padded = padding + text + padding
    for start in range(len(padded) - length + 1):
        yield padded[start:start + length]


def _by_count(
    kind: ReportKind,
    units: Iterable[str],
    ngram_length: int | None = None,
) -> FrequencyReport:
    # Counter preserves first-insertion order and sorted() is stable
    counter = Counter(units)
    rows = [
        FrequencyRow(unit=unit, count=count)
        for unit, count in sorted(counter.items(), key=lambda item: item[1])
    ]
    return FrequencyReport(kind=kind, rows=rows, ngram_length=ngram_length)
