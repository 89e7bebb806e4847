from abc import ABC, abstractmethod
from typing import Any

from scytale.models.schemas import CipherFamily, CipherInfo, CipherType


class TextCipher(ABC):
    """
    Abstract base class for all text ciphers.

    A cipher instance owns its key, which is validated once at construction
    and never changes afterwards. Each implementation must provide:
    - encrypt(): Transform plaintext into ciphertext
    - decrypt(): Transform ciphertext back into plaintext
    - from_key(): Build an instance from textual key material

    Both transformations are total: any text is accepted and characters the
    cipher does not handle pass through unchanged.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    @abstractmethod
    def encrypt(self, text: str) -> str:
        """
        Encrypt text with this cipher's key.

        Args:
            text: The plaintext to encrypt

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def decrypt(self, text: str) -> str:
        """
        Decrypt text with this cipher's key.

        Args:
            text: The ciphertext to decrypt

        Returns:
            Plaintext
        """
        pass

    @classmethod
    @abstractmethod
    def from_key(cls, key: str | None) -> "TextCipher":
        """
        Build a cipher from a key given as text (e.g. on the command line).

        Args:
            key: Raw key material, or None when the cipher needs no key

        Returns:
            A ready-to-use cipher instance

        Raises:
            InvalidKeyError: If the key cannot be used by this cipher
        """
        pass

    @classmethod
    def info(cls) -> CipherInfo:
        """Return descriptive metadata for this cipher."""
        return CipherInfo(
            name=cls.name,
            cipher_type=cls.cipher_type,
            cipher_family=cls.cipher_family,
            description=cls.description,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repr_key()!r})"

    def _repr_key(self) -> Any:
        return None
