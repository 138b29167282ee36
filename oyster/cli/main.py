# oyster/cli/main.py
"""
CLI for encoding and decoding values with the oyster codecs.
"""

import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from oyster.core.alphabet import ALPHABET
from oyster.core.btt64 import btt64_decode_str
from oyster.core.errors import InvalidInputError, InvalidUtf8Error
from oyster.core.types import CODECS, Codec, get_codec

app = typer.Typer(
    name="oyster",
    help="Encode and decode bytes and big integers as URL-safe text",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

DEFAULT_CODEC = "btt64"


def resolve_codec(codec_flag: Optional[str] = None) -> Codec:
    """Resolve the codec in this order:
    1. --codec flag
    2. OYSTER_CODEC environment variable
    3. Default: btt64
    """
    name = codec_flag or os.environ.get("OYSTER_CODEC") or DEFAULT_CODEC
    try:
        return get_codec(name.strip().lower())
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)


def _parse_int(value: str) -> int:
    try:
        return int(value, 10)
    except ValueError:
        console.print(f"[red]Not a decimal integer: {escape(repr(value))}[/]")
        raise typer.Exit(1)


def _parse_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        console.print(f"[red]Not a hex byte string: {escape(repr(value))}[/]")
        raise typer.Exit(1)


def _check_hex_flag(c: Codec, hex_flag: bool) -> None:
    if hex_flag and c.name != "btt64":
        console.print(f"[red]--hex only applies to btt64, not {c.name}[/]")
        raise typer.Exit(1)


def _print_payload(text: str) -> None:
    """Print an encoded or decoded value exactly as is."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.command()
def encode(
    value: str = typer.Argument(..., help="Text (btt64) or decimal integer (radix64, radix256)"),
    codec: Optional[str] = typer.Option(None, "--codec", "-c", help="btt64, radix64 or radix256 (overrides OYSTER_CODEC)"),
    hex_input: bool = typer.Option(False, "--hex", help="btt64 only: VALUE is hex bytes instead of UTF-8 text"),
):
    """Encode a value with the selected codec."""
    c = resolve_codec(codec)
    _check_hex_flag(c, hex_input)

    if c.value_kind == "bytes":
        payload = _parse_hex(value) if hex_input else value.encode("utf-8")
    else:
        payload = _parse_int(value)

    try:
        encoded = c.encode(payload)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Encoding failed: {escape(str(e))}[/]")
        raise typer.Exit(1)

    _print_payload(encoded.hex() if c.encoded_kind == "bytes" else encoded)


@app.command()
def decode(
    value: str = typer.Argument(..., help="Encoded text (btt64, radix64) or hex bytes (radix256)"),
    codec: Optional[str] = typer.Option(None, "--codec", "-c", help="btt64, radix64 or radix256 (overrides OYSTER_CODEC)"),
    hex_output: bool = typer.Option(False, "--hex", help="btt64 only: print decoded bytes as hex"),
):
    """Decode a value with the selected codec."""
    c = resolve_codec(codec)
    _check_hex_flag(c, hex_output)

    encoded = _parse_hex(value) if c.encoded_kind == "bytes" else value

    try:
        if c.name == "btt64" and not hex_output:
            decoded = btt64_decode_str(encoded)
        else:
            decoded = c.decode(encoded)
    except InvalidUtf8Error as e:
        console.print(f"[red]Decoding failed: {escape(str(e))}[/]")
        console.print("[yellow]Use --hex to print the raw bytes.[/]")
        raise typer.Exit(1)
    except InvalidInputError as e:
        console.print(f"[red]Decoding failed: {escape(str(e))}[/]")
        raise typer.Exit(1)

    if isinstance(decoded, bytes):
        decoded = decoded.hex()
    _print_payload(str(decoded))


@app.command()
def alphabet():
    """Show the 64-symbol alphabet with each symbol's index."""
    table = Table(title="Alphabet")
    table.add_column("Index", justify="right")
    table.add_column("Bits")
    table.add_column("Symbol")

    for i, sym in enumerate(ALPHABET):
        table.add_row(str(i), f"{i:06b}", sym)

    console.print(table)


@app.command()
def codecs():
    """List the available codecs."""
    table = Table(title="Codecs")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Encoded as")
    table.add_column("Description")

    for c in CODECS.values():
        table.add_row(c.name, c.value_kind, c.encoded_kind, c.description)

    console.print(table)


if __name__ == "__main__":
    app()
