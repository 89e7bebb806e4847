"""
Substitution key files.

A key file is a CSV table with a header row naming two columns, ``key``
(one plaintext character) and ``values`` (the cipher alternatives):

    key,values
    a,12
    z,3

Later rows override earlier rows with the same key.
"""

import csv
import logging
from pathlib import Path

from scytale.core.exceptions import KeyFileError

logger = logging.getLogger(__name__)

KEY_COLUMN = "key"
VALUES_COLUMN = "values"


def load_substitution_key(path: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """
    Read a substitution key from a CSV file.

    Args:
        path: Location of the key file
        encoding: Text encoding of the file

    Returns:
        Mapping of plaintext character to alternatives string

    Raises:
        KeyFileError: If the file cannot be read or a row is malformed
    """
    path = Path(path)
    try:
        with path.open(newline="", encoding=encoding) as handle:
            return _parse_rows(csv.DictReader(handle), path)
    except OSError as e:
        raise KeyFileError(
            f"Cannot read key file '{path}': {e.strerror or e}",
            {"path": str(path)},
        ) from e
    except (UnicodeDecodeError, csv.Error) as e:
        raise KeyFileError(
            f"Malformed key file '{path}': {e}",
            {"path": str(path)},
        ) from e


def _parse_rows(reader: csv.DictReader, path: Path) -> dict[str, str]:
    fieldnames = reader.fieldnames or []
    missing = [col for col in (KEY_COLUMN, VALUES_COLUMN) if col not in fieldnames]
    if missing:
        raise KeyFileError(
            f"Key file '{path}' is missing column(s): {', '.join(missing)}",
            {"path": str(path), "missing": missing},
        )

    key: dict[str, str] = {}
    # Row 1 is the header
    for row_number, record in enumerate(reader, start=2):
        letter = record[KEY_COLUMN] or ""
        values = record[VALUES_COLUMN] or ""

        if len(letter) != 1:
            raise KeyFileError(
                f"Key file '{path}' row {row_number}: key must be a single character, got {letter!r}",
                {"path": str(path), "row": row_number},
            )
        if not values:
            raise KeyFileError(
                f"Key file '{path}' row {row_number}: no alternatives for {letter!r}",
                {"path": str(path), "row": row_number},
            )

        key[letter] = values

    logger.debug("Loaded %d key entries from %s", len(key), path)
    return key
