"""
scytale CLI
===========

Click-based command-line interface for encrypting, decrypting and
counting text with the classical ciphers.

Usage::

    scytale ciphers
    scytale encrypt caesar --key 3 "Hello, World"
    scytale decrypt vigenere --key lemon lxfopv
    scytale encrypt substitution --key-file key.csv "attack at dawn"
    echo "the cat sat" | scytale count words
    scytale count ngrams --length 3 "banana"
"""

import logging
import sys
from typing import Optional

import click

from scytale.core.config import get_settings
from scytale.core.exceptions import ScytaleError, TextTooLongError
from scytale.core.logger import configure_logging
from scytale.models.schemas import CipherType, FrequencyReport
from scytale.services.analysis.frequency import count_characters, count_ngrams, count_words
from scytale.services.engines.base import TextCipher
from scytale.services.engines.registry import CipherRegistry

logger = logging.getLogger(__name__)

CIPHER_CHOICES = [cipher_type.value for cipher_type in CipherType]


def _read_text(text: Optional[str]) -> str:
    """Return the TEXT argument, or standard input when it is omitted."""
    if text is None:
        text = sys.stdin.read()
        # a trailing newline belongs to the terminal, not the message
        if text.endswith("\n"):
            text = text[:-1]

    max_length = get_settings().max_text_length
    if len(text) > max_length:
        raise TextTooLongError(len(text), max_length)
    return text


def _build_cipher(cipher: str, key: Optional[str], key_file: Optional[str]) -> TextCipher:
    if key is not None and key_file is not None:
        raise click.UsageError("Use either --key or --key-file, not both.")

    # only the substitution cipher reads its key from a file
    if cipher == CipherType.SUBSTITUTION.value:
        if key is not None:
            raise click.UsageError("The substitution cipher takes --key-file, not --key.")
        return CipherRegistry.create(cipher, key_file)

    if key_file is not None:
        raise click.UsageError(f"--key-file is only used by the substitution cipher, not {cipher}.")
    return CipherRegistry.create(cipher, key)


class _ScytaleGroup(click.Group):
    """Click group reporting ScytaleError as a clean CLI error."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except ScytaleError as e:
            logger.debug("Command failed: %s", e.message, extra={"details": e.details})
            raise click.ClickException(e.message) from e


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group(cls=_ScytaleGroup)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.version_option(package_name="scytale")
def cli(log_level: Optional[str]) -> None:
    """Classical ciphers and frequency analysis for cryptanalysis exercises."""
    configure_logging(log_level or get_settings().log_level)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
def ciphers() -> None:
    """List the available ciphers."""
    for info in CipherRegistry.describe_all():
        click.echo(f"{info.cipher_type.value:<14}{info.cipher_family.value:<16}{info.name}")


def _cipher_command(name: str, help_text: str, decrypt: bool):
    @cli.command(name, help=help_text)
    @click.argument("cipher", type=click.Choice(CIPHER_CHOICES, case_sensitive=False))
    @click.argument("text", required=False)
    @click.option("--key", "-k", default=None, help="Shift (caesar) or keyword (vigenere).")
    @click.option(
        "--key-file",
        type=click.Path(dir_okay=False),
        default=None,
        help="CSV key file with 'key' and 'values' columns (substitution).",
    )
    def command(cipher: str, text: Optional[str], key: Optional[str], key_file: Optional[str]) -> None:
        engine = _build_cipher(cipher.lower(), key, key_file)
        message = _read_text(text)
        click.echo(engine.decrypt(message) if decrypt else engine.encrypt(message))

    return command


encrypt = _cipher_command(
    "encrypt",
    "Encrypt TEXT (or standard input) with CIPHER.",
    decrypt=False,
)
decrypt = _cipher_command(
    "decrypt",
    "Decrypt TEXT (or standard input) with CIPHER.",
    decrypt=True,
)


@cli.command()
@click.argument("unit", type=click.Choice(["chars", "words", "ngrams"]))
@click.argument("text", required=False)
@click.option(
    "--length", "-n",
    type=int,
    default=None,
    help="N-gram length (defaults to the configured length).",
)
def count(unit: str, text: Optional[str], length: Optional[int]) -> None:
    """Print a frequency report for TEXT (or standard input).

    Each line is '<unit>,<count>'. Characters are ordered by character,
    words and n-grams by ascending count.
    """
    if length is not None and unit != "ngrams":
        raise click.UsageError(f"--length only applies to ngrams, not {unit}.")

    message = _read_text(text)
    settings = get_settings()

    report: FrequencyReport
    if unit == "chars":
        report = count_characters(message)
    elif unit == "words":
        report = count_words(message)
    else:
        report = count_ngrams(
            message,
            length if length is not None else settings.default_ngram_length,
            pad=settings.ngram_pad,
        )

    click.echo(report.to_text(), nl=False)


def main() -> None:
    """Main entry point for the scytale CLI."""
    cli()


if __name__ == "__main__":
    main()
