import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from scytale.core.config import get_settings
from scytale.core.exceptions import InvalidKeyError
from scytale.models.schemas import CipherFamily, CipherType
from scytale.services.engines.base import TextCipher
from scytale.services.engines.registry import CipherRegistry
from scytale.services.keys.loader import load_substitution_key

logger = logging.getLogger(__name__)


@CipherRegistry.register
class SubstitutionCipher(TextCipher):
    """
    Homophonic substitution cipher.

    The key maps a plaintext character to a string of cipher alternatives.
    The character at position ``i`` of the input is replaced by
    ``alternatives[i % len(alternatives)]``, so repeated letters rotate
    through their alternatives and single-letter frequencies flatten out.
    The rotation index is the position in the whole input, not a
    per-letter counter.

        >>> cipher = SubstitutionCipher({"a": "hey!", "b": "world"})
        >>> cipher.encrypt("aaaa bbbbb")
        'hey! world'
        >>> cipher.decrypt("hey! world")
        'aaaa bbbbb'

    Decryption maps every alternative back to its key character. When two
    key characters share an alternative the mapping is ambiguous: entries
    are applied in ascending key order and the last one wins.
    """

    name = "Substitution Cipher"
    cipher_type = CipherType.SUBSTITUTION
    cipher_family = CipherFamily.HOMOPHONIC
    description = (
        "Each plaintext letter maps to a set of cipher symbols that are used in "
        "rotation, flattening the letter frequencies that break simple "
        "substitution. Decryption is lossy when two letters share a symbol."
    )

    def __init__(self, key: Mapping[str, str]):
        self._key = MappingProxyType(dict(sorted(self._validate(key).items())))

    @staticmethod
    def _validate(key: Mapping[str, str]) -> dict[str, str]:
        if not isinstance(key, Mapping):
            raise InvalidKeyError(
                f"Substitution key must be a mapping, got {type(key).__name__}",
            )

        validated = {}
        for letter, alternatives in key.items():
            if not isinstance(letter, str) or len(letter) != 1:
                raise InvalidKeyError(
                    f"Substitution key entries must be single characters, got {letter!r}",
                    {"key": letter},
                )
            if not isinstance(alternatives, str) or not alternatives:
                raise InvalidKeyError(
                    f"No cipher alternatives for {letter!r}",
                    {"key": letter, "values": alternatives},
                )
            validated[letter] = alternatives
        return validated

    @property
    def key(self) -> Mapping[str, str]:
        """Read-only view of the key, in ascending key order."""
        return self._key

    @classmethod
    def from_csv(cls, path: str | Path, encoding: str | None = None) -> "SubstitutionCipher":
        """
        Build a cipher from a CSV key file with ``key`` and ``values`` columns.

        Args:
            path: Location of the key file
            encoding: File encoding; defaults to the configured key file encoding

        Returns:
            SubstitutionCipher keyed from the file
        """
        if encoding is None:
            encoding = get_settings().key_file_encoding
        return cls(load_substitution_key(path, encoding=encoding))

    @classmethod
    def from_key(cls, key: str | None) -> "SubstitutionCipher":
        """Treat ``key`` as the path of a CSV key file."""
        if not key:
            raise InvalidKeyError("Substitution cipher requires a key file")
        return cls.from_csv(key)

    def encrypt(self, text: str) -> str:
        """Replace mapped characters, rotating alternatives by text position."""
        result = []

        for i, char in enumerate(text):
            alternatives = self._key.get(char)
            if alternatives is None:
                result.append(char)
            else:
                result.append(alternatives[i % len(alternatives)])

        return "".join(result)

    def decrypt(self, text: str) -> str:
        """Map every cipher alternative back to its key character."""
        reverse = self._reverse_key()
        return "".join(reverse.get(char, char) for char in text)

    def _reverse_key(self) -> dict[str, str]:
        """Build alternative -> key character; later entries win collisions."""
        reverse: dict[str, str] = {}
        for letter, alternatives in self._key.items():
            for symbol in alternatives:
                if symbol in reverse and reverse[symbol] != letter:
                    logger.debug(
                        "Alternative %r maps to both %r and %r; using %r",
                        symbol, reverse[symbol], letter, letter,
                    )
                reverse[symbol] = letter
        return reverse

    def _repr_key(self) -> dict[str, str]:
        return dict(self._key)
