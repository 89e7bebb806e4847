from itertools import cycle

from scytale.core.exceptions import InvalidKeyError
from scytale.models.schemas import CipherFamily, CipherType
from scytale.services.engines.base import TextCipher
from scytale.services.engines.registry import CipherRegistry
from scytale.services.engines.shift import inverse_shift, is_letter, shift_char


@CipherRegistry.register
class VigenereCipher(TextCipher):
    """
    Vigenère cipher.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift ('a' = 0 ... 'z' = 25, case ignored).

    Text and key are paired purely by position: character ``i`` of the text
    uses key letter ``i % len(key)`` whether or not it is itself a letter.
    Non-letters therefore consume a key letter while passing through
    unchanged. The key repeats for as long as the text runs.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )

    def __init__(self, key: str):
        if not isinstance(key, str) or not key:
            raise InvalidKeyError("Vigenère key must be a non-empty string")
        if not all(is_letter(c) for c in key):
            raise InvalidKeyError(
                f"Vigenère key must contain only letters A-Z, got {key!r}",
                {"key": key},
            )
        self._key = key.lower()

    @property
    def key(self) -> str:
        """Lowercased keyword."""
        return self._key

    @property
    def shifts(self) -> list[int]:
        """Shift amount for each key position."""
        return [ord(c) - ord("a") for c in self._key]

    @classmethod
    def from_key(cls, key: str | None) -> "VigenereCipher":
        if key is None:
            raise InvalidKeyError("Vigenère cipher requires a keyword")
        return cls(key)

    def encrypt(self, text: str) -> str:
        """Shift each letter forward by its paired key letter."""
        return "".join(
            shift_char(char, shift)
            for char, shift in zip(text, cycle(self.shifts))
        )

    def decrypt(self, text: str) -> str:
        """Shift each letter back by its paired key letter."""
        return "".join(
            shift_char(char, inverse_shift(shift))
            for char, shift in zip(text, cycle(self.shifts))
        )

    def _repr_key(self) -> str:
        return self._key
