"""Classical text ciphers and frequency analysis for cryptanalysis exercises."""

from scytale.core.exceptions import (
    CipherNotFoundError,
    InvalidArgumentError,
    InvalidKeyError,
    KeyFileError,
    ScytaleError,
    ValidationError,
)
from scytale.models.schemas import CipherFamily, CipherType, FrequencyReport, FrequencyRow
from scytale.services.analysis.frequency import count_characters, count_ngrams, count_words
from scytale.services.engines.base import TextCipher
from scytale.services.engines.registry import CipherRegistry
from scytale.services.engines.homophonic import SubstitutionCipher
from scytale.services.engines.monoalphabetic import CaesarCipher, ROT13Cipher, rot13
from scytale.services.engines.polyalphabetic import VigenereCipher
from scytale.services.keys.loader import load_substitution_key

__version__ = "0.1.0"

__all__ = [
    "CaesarCipher",
    "CipherFamily",
    "CipherNotFoundError",
    "CipherRegistry",
    "CipherType",
    "FrequencyReport",
    "FrequencyRow",
    "InvalidArgumentError",
    "InvalidKeyError",
    "KeyFileError",
    "ROT13Cipher",
    "ScytaleError",
    "SubstitutionCipher",
    "TextCipher",
    "ValidationError",
    "VigenereCipher",
    "count_characters",
    "count_ngrams",
    "count_words",
    "load_substitution_key",
    "rot13",
]
