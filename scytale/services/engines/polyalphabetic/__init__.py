"""Polyalphabetic ciphers."""

from scytale.services.engines.polyalphabetic.vigenere import VigenereCipher

__all__ = [
    "VigenereCipher",
]
