from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    HOMOPHONIC = "homophonic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    ROT13 = "rot13"
    VIGENERE = "vigenere"
    SUBSTITUTION = "substitution"


class ReportKind(str, Enum):
    """Unit counted by a frequency report."""

    CHARACTERS = "characters"
    WORDS = "words"
    NGRAMS = "ngrams"


# ============================================================================
# Frequency Schemas
# ============================================================================


class FrequencyRow(BaseModel):
    """A single counted unit."""

    model_config = ConfigDict(frozen=True)

    unit: str
    count: int = Field(ge=1)

    def render(self) -> str:
        return f"{self.unit},{self.count}\n"


class FrequencyReport(BaseModel):
    """
    Ordered occurrence counts for one kind of unit.

    Row order is part of the contract: character reports are sorted by
    unit, word and n-gram reports by ascending count.
    """

    model_config = ConfigDict(frozen=True)

    kind: ReportKind
    rows: list[FrequencyRow] = Field(default_factory=list)
    ngram_length: int | None = None

    def __len__(self) -> int:
        return len(self.rows)

    def as_dict(self) -> dict[str, int]:
        """Return the counts keyed by unit, preserving row order."""
        return {row.unit: row.count for row in self.rows}

    def to_text(self) -> str:
        """Render each row as ``<unit>,<count>`` on its own line."""
        return "".join(row.render() for row in self.rows)


# ============================================================================
# Cipher Metadata Schemas
# ============================================================================


class CipherInfo(BaseModel):
    """Descriptive metadata for a registered cipher."""

    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
