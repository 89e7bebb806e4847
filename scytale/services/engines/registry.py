import logging
from typing import Type

from scytale.core.exceptions import CipherNotFoundError
from scytale.models.schemas import CipherFamily, CipherInfo, CipherType
from scytale.services.engines.base import TextCipher

logger = logging.getLogger(__name__)


class CipherRegistry:
    """
    Registry for cipher classes.

    Maps each CipherType to the TextCipher subclass implementing it and
    builds keyed instances on request.
    """

    _ciphers: dict[CipherType, Type[TextCipher]] = {}

    @classmethod
    def register(cls, cipher_class: Type[TextCipher]) -> Type[TextCipher]:
        """
        Register a cipher class.

        Can be used as a decorator:
            @CipherRegistry.register
            class CaesarCipher(TextCipher):
                ...

        Args:
            cipher_class: The cipher class to register

        Returns:
            The cipher class (for decorator usage)
        """
        cls._ciphers[cipher_class.cipher_type] = cipher_class
        return cipher_class

    @classmethod
    def get(cls, cipher_type: CipherType | str) -> Type[TextCipher]:
        """
        Get the cipher class for the specified cipher type.

        Args:
            cipher_type: The type of cipher, as enum member or its value

        Returns:
            The registered cipher class

        Raises:
            CipherNotFoundError: If no cipher is registered under that type
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise CipherNotFoundError(str(cipher_type)) from None

        if cipher_type not in cls._ciphers:
            raise CipherNotFoundError(cipher_type.value)

        return cls._ciphers[cipher_type]

    @classmethod
    def create(cls, cipher_type: CipherType | str, key: str | None = None) -> TextCipher:
        """
        Build a keyed cipher instance.

        Args:
            cipher_type: The type of cipher
            key: Raw key material understood by the cipher's from_key()

        Returns:
            Cipher instance
        """
        cipher_class = cls.get(cipher_type)
        cipher = cipher_class.from_key(key)
        logger.debug("Created %r", cipher)
        return cipher

    @classmethod
    def get_by_family(cls, family: CipherFamily) -> list[Type[TextCipher]]:
        """
        Get all cipher classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of cipher classes
        """
        return [
            cipher_class
            for cipher_class in cls._ciphers.values()
            if cipher_class.cipher_family == family
        ]

    @classmethod
    def describe_all(cls) -> list[CipherInfo]:
        """Metadata for every registered cipher, in registration order."""
        return [cipher_class.info() for cipher_class in cls._ciphers.values()]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._ciphers.keys())


# Import ciphers to trigger registration
def _load_ciphers() -> None:
    """Load all cipher modules to trigger registration."""
    from scytale.services.engines import monoalphabetic  # noqa: F401
    from scytale.services.engines import homophonic  # noqa: F401
    from scytale.services.engines import polyalphabetic  # noqa: F401


# Load ciphers when module is imported
_load_ciphers()
