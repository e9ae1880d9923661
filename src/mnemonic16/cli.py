"""
Command line interface.
"""

import base64
import binascii
import importlib.metadata
import logging
import pathlib
import secrets
import sys
import textwrap

from . import codec, config
from .errors import DecodeError
from .types import ByteFormat

import click

logging.getLogger().setLevel(logging.CRITICAL)

logger = logging.getLogger("mnemonic16")
# logger.setLevel(logging.DEBUG)
logger.setLevel(logging.CRITICAL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
logger.addHandler(handler)


def encode_bytes(data: bytes, format: ByteFormat) -> str:
    match format:
        case "hex":
            return data.hex()
        case "base64":
            return base64.b64encode(data).decode()
        case _:
            raise NotImplementedError


def decode_bytes(text: str, format: ByteFormat) -> bytes:
    match format:
        case "hex":
            return bytes.fromhex(text.strip())
        case "base64":
            try:
                return base64.b64decode(text.strip(), validate=True)
            except binascii.Error as e:
                raise ValueError(f"Invalid base64 string ({e}).")
        case _:
            raise NotImplementedError


def clean_phrase(phrase: str) -> str:
    """Collapses any whitespace of manually entered phrases into single spaces."""
    return " ".join(phrase.lower().split())


def read_input(value: str | None, format: ByteFormat | None = None) -> str | bytes:
    """Returns the given command line argument, or reads the input from stdin if the argument is missing."""
    if format == "raw":
        if value is not None:
            raise click.BadParameter("Raw input can only be read from stdin.")
        return click.get_binary_stream("stdin").read()
    if value is not None:
        return value
    return click.get_text_stream("stdin").read()


def error(text: str) -> None:
    print("\x1b[31m" + f"ERROR: {text}" + "\x1b[0m")


def print_info_box(title: str, content: list[str], width: int = 80) -> None:
    """Returns a 'fancy-looking' box to highlight import information."""
    content_width = width - 6
    wrapped_content = [" " * content_width]
    for line in content:
        if len(line) <= content_width:
            wrapped_content.append(line.ljust(content_width))
        else:
            for wrapped_line in textwrap.wrap(line, content_width):
                wrapped_content.append(wrapped_line.ljust(content_width))
    wrapped_content.append(" " * content_width)

    box_lines = []
    box_lines.append("".join(["╭", "─" * (len(title) + 4), "╮"]).center(width))
    l1 = (width - len(title) - 8) // 2
    l2 = (width - len(title) - 8) - l1
    box_lines.append("".join(["╔", "═" * l1, f"╡  {title}  ╞", "═" * l2, "╗"]))
    box_lines.append("".join(["║", " " * l1, "╰", "─" * (len(title) + 4), "╯", " " * l2, "║"]))
    for line in wrapped_content:
        box_lines.append("".join(["║  ", line, "  ║"]))
    box_lines.append("".join(["╚", "═" * (width - 2), "╝"]))

    print()
    print("\n".join(box_lines))
    print()


def numbered_words(phrase: str, per_line: int = 5) -> list[str]:
    """Lays out the words of a phrase in numbered rows for easier transcription."""
    words = phrase.split()
    lines = []
    for start in range(0, len(words), per_line):
        lines.append("   ".join(f"{i + 1: >2}. {w: <9}" for i, w in enumerate(words[start : start + per_line], start)))
    return lines


def format_option(help: str):
    return click.option(
        "--format",
        help=help,
        type=click.Choice(ByteFormat.__args__),
        required=False,
        metavar="FORMAT",
    )


def abbreviated_option(func):
    return click.option(
        "--abbreviated/--full",
        default=None,
        help="Shorten every word to its unique prefix, or write out full words.",
    )(func)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default=config.CONFIG_PATH,
    help="Path of the configuration file.",
)
@click.pass_context
def mnemonic16(ctx: click.Context, config_path: pathlib.Path) -> None:
    """Mnemonic16: Converts binary data into a human friendly phrase and back.

    Each word of a phrase encodes 16 bits of data, e.g. "sugar21 toffee21 mob32". Words may be abbreviated to their
    first 3 letters when typing in a phrase.
    """
    try:
        cfg = config.load(config_path)
    except FileNotFoundError:
        cfg = config.DEFAULT_CONFIG
    except Exception as e:
        error(f"Configuration file invalid. {e}")
        print("Exiting.")
        sys.exit(1)

    logger.setLevel(cfg.get_log_level())
    logger.debug(f"Using configuration {cfg}.")
    ctx.obj = cfg


@mnemonic16.command()
@click.argument("data", required=False)
@format_option("Format of the input data. [hex|base64|raw]")
@abbreviated_option
@click.pass_obj
def encode(cfg: config.Config, data: str | None, format: ByteFormat | None, abbreviated: bool | None) -> None:
    """Encode binary data as a phrase. Reads DATA from stdin if not given."""
    fmt = format or cfg.byte_format
    try:
        value = read_input(data, fmt)
        if isinstance(value, str):
            value = decode_bytes(value, fmt)
    except ValueError as e:
        error(f"Failed to parse {fmt} input. {e}")
        sys.exit(1)

    logger.debug(f"Encoding {len(value)} bytes.")
    print(codec.binary_to_phrase(value, cfg.abbreviated if abbreviated is None else abbreviated))


@mnemonic16.command()
@click.argument("phrase", required=False)
@format_option("Format of the recovered data. [hex|base64|raw]")
@click.pass_obj
def decode(cfg: config.Config, phrase: str | None, format: ByteFormat | None) -> None:
    """Decode a phrase back into binary data. Reads PHRASE from stdin if not given."""
    fmt = format or cfg.byte_format
    try:
        data = codec.phrase_to_binary(clean_phrase(str(read_input(phrase))))
    except DecodeError as e:
        error(str(e))
        sys.exit(1)

    if fmt == "raw":
        stdout = click.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()
    else:
        print(encode_bytes(data, fmt))


@mnemonic16.command()
@click.argument("phrase", required=False)
@abbreviated_option
@click.pass_obj
def normalize(cfg: config.Config, phrase: str | None, abbreviated: bool | None) -> None:
    """Validate a phrase and rewrite it using full or abbreviated words."""
    try:
        result = codec.normalize_phrase(
            clean_phrase(str(read_input(phrase))), cfg.abbreviated if abbreviated is None else abbreviated
        )
    except DecodeError as e:
        error(str(e))
        sys.exit(1)
    print(result)


@mnemonic16.command()
@click.option(
    "--bytes",
    "num_bytes",
    type=click.IntRange(min=1, max=1024),
    default=16,
    show_default=True,
    help="Number of random bytes to generate.",
)
@abbreviated_option
@click.pass_obj
def generate(cfg: config.Config, num_bytes: int, abbreviated: bool | None) -> None:
    """Generate random data and display it as a phrase."""
    data = secrets.token_bytes(num_bytes)
    phrase = codec.binary_to_phrase(data, cfg.abbreviated if abbreviated is None else abbreviated)
    print_info_box(
        f"RANDOM {num_bytes * 8} BIT PHRASE",
        numbered_words(phrase) + ["", f"hex: {data.hex()}"],
    )


@mnemonic16.command()
def version() -> None:
    """Display version information of this tool."""
    click.echo(f"Mnemonic16: {importlib.metadata.version('mnemonic16')}")
    click.echo("Libraries: ")
    for lib in ("click",):
        click.echo(f" - {lib}: {importlib.metadata.version(lib)}")


def main():
    mnemonic16(prog_name=mnemonic16.name)
