"""Homophonic substitution ciphers."""

from scytale.services.engines.homophonic.substitution import SubstitutionCipher

__all__ = [
    "SubstitutionCipher",
]
