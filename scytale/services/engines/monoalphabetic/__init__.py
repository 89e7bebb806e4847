"""Monoalphabetic ciphers."""

from scytale.services.engines.monoalphabetic.caesar import CaesarCipher
from scytale.services.engines.monoalphabetic.rot13 import ROT13Cipher, rot13

__all__ = [
    "CaesarCipher",
    "ROT13Cipher",
    "rot13",
]
