import logging

from scytale.core.exceptions import InvalidKeyError
from scytale.models.schemas import CipherFamily, CipherType
from scytale.services.engines.base import TextCipher
from scytale.services.engines.registry import CipherRegistry
from scytale.services.engines.shift import ALPHABET_SIZE, inverse_shift, shift_text

logger = logging.getLogger(__name__)


@CipherRegistry.register
class CaesarCipher(TextCipher):
    """
    Caesar cipher.

    Shifts every Latin letter by a fixed amount, preserving case. Any
    integer is a valid key; it is reduced mod 26, so keys 0 and 26 leave
    the text unchanged. Digits, punctuation and whitespace pass through.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )

    def __init__(self, key: int):
        # bool is an int subclass but never a meaningful shift
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidKeyError(
                f"Caesar key must be an integer, got {key!r}",
                {"key": key},
            )
        self._key = key % ALPHABET_SIZE

    @property
    def key(self) -> int:
        """Shift amount in [0, 25]."""
        return self._key

    @classmethod
    def from_key(cls, key: str | None) -> "CaesarCipher":
        """Parse a decimal shift such as ``"3"`` or ``"-1"``."""
        if key is None:
            raise InvalidKeyError("Caesar cipher requires a shift key")
        try:
            shift = int(key)
        except ValueError:
            raise InvalidKeyError(
                f"Caesar key must be an integer, got {key!r}",
                {"key": key},
            ) from None
        return cls(shift)

    def encrypt(self, text: str) -> str:
        """Shift each letter forward by the key."""
        return shift_text(text, self._key)

    def decrypt(self, text: str) -> str:
        """Shift each letter back by the key."""
        return shift_text(text, inverse_shift(self._key))

    def _repr_key(self) -> int:
        return self._key
