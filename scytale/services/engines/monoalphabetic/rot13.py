from scytale.models.schemas import CipherFamily, CipherType
from scytale.services.engines.base import TextCipher
from scytale.services.engines.registry import CipherRegistry
from scytale.services.engines.shift import shift_text

SHIFT = 13


def rot13(text: str) -> str:
    """
    Rotate every Latin letter by 13 positions, preserving case.

    Applying it twice returns the original text:

        >>> rot13("Hey! What time is it?")
        'Url! Jung gvzr vf vg?'
        >>> rot13(rot13("abcde"))
        'abcde'
    """
    return shift_text(text, SHIFT)


@CipherRegistry.register
class ROT13Cipher(TextCipher):
    """
    ROT13 cipher.

    ROT13 is a special case of the Caesar cipher with a fixed shift of 13.
    Since 13 is exactly half of 26, applying ROT13 twice returns the original text,
    making encryption and decryption identical operations.
    """

    name = "ROT13 Cipher"
    cipher_type = CipherType.ROT13
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A special case of Caesar cipher with shift 13. "
        "Applying ROT13 twice returns the original text. "
        "Commonly used for simple obfuscation (e.g., hiding spoilers)."
    )

    @classmethod
    def from_key(cls, key: str | None) -> "ROT13Cipher":
        """ROT13 has no key; anything supplied is ignored."""
        return cls()

    def encrypt(self, text: str) -> str:
        """Encrypt (same as decrypt for ROT13)."""
        return rot13(text)

    def decrypt(self, text: str) -> str:
        """Decrypt (same as encrypt for ROT13)."""
        return rot13(text)
