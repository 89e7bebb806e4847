"""Alphabet shift primitive shared by the shift-based ciphers."""

import string

ALPHABET_SIZE = 26

UPPERCASE = frozenset(string.ascii_uppercase)
LOWERCASE = frozenset(string.ascii_lowercase)


def is_letter(char: str) -> bool:
    """Return True for a single ASCII Latin letter."""
    return char in UPPERCASE or char in LOWERCASE


def shift_letter(letter: str, amount: int) -> str:
    """
    Shift a Latin letter by ``amount`` positions, preserving case.

    Args:
        letter: A single ASCII letter
        amount: Shift amount; reduced mod 26

    Returns:
        The shifted letter
    """
    base = ord("A") if letter in UPPERCASE else ord("a")
    return chr((ord(letter) - base + amount % ALPHABET_SIZE) % ALPHABET_SIZE + base)


def shift_char(char: str, amount: int) -> str:
    """Shift letters; any other character is returned unchanged."""
    if char in UPPERCASE or char in LOWERCASE:
        return shift_letter(char, amount)
    return char


def shift_text(text: str, amount: int) -> str:
    """Apply the same shift to every letter in ``text``."""
    return "".join(shift_char(char, amount) for char in text)


def inverse_shift(amount: int) -> int:
    """Return the shift that undoes ``amount``."""
    return (ALPHABET_SIZE - amount % ALPHABET_SIZE) % ALPHABET_SIZE
