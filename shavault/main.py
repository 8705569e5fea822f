"""
ShaVault - Main Entry Point

Command-line front end for the from-scratch SHA-256 implementation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import typer

from .config import Settings, load_config
from .core_crypto.sha256 import sha256_hex
from .diagnostics.printing import trace_message
from .errors import Sha256Error
from .vectors import BOUNDARY_LENGTHS, KNOWN_VECTORS, boundary_message, reference_digest


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="shavault: from-scratch FIPS 180-4 SHA-256")


def _settings(overrides: Dict[str, Any]) -> Settings:
    try:
        settings = load_config(overrides)
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=2)
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT, level=settings.log_level)
    return settings


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.command("hash", context_settings={"ignore_unknown_options": True})
def hash_text(
    words: Optional[List[str]] = typer.Argument(None, help="Words to hash, joined by the separator"),
    trace: Optional[bool] = typer.Option(None, "--trace/--no-trace", help="Dump padded buffer and schedules"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Text encoding (default utf-8)"),
) -> None:
    """Hash the command-line words and print the hex digest."""
    settings = _settings({"trace": trace, "encoding": encoding})

    if not words:
        if settings.require_input:
            typer.echo("No input given.", err=True)
            raise typer.Exit(code=2)
        logger.debug("No input words, nothing to hash")
        return

    text = settings.separator.join(words)
    try:
        data = text.encode(settings.encoding)
    except (LookupError, UnicodeError) as e:
        _fail(f"Cannot encode input as {settings.encoding}: {e}")

    try:
        if settings.trace:
            typer.echo(f"Input: {text}")
            typer.echo(trace_message(data))
        typer.echo(sha256_hex(data))
    except Sha256Error as e:
        _fail(f"Error: {e}")


@app.command("file")
def hash_file(
    path: Path = typer.Argument(..., help="File whose contents are hashed"),
) -> None:
    """Hash a file's contents (read fully into memory)."""
    _settings({})
    try:
        data = path.read_bytes()
    except OSError as e:
        _fail(f"Error reading file '{path}': {e}")

    logger.info("Read %d bytes from %s", len(data), path)
    try:
        typer.echo(f"{sha256_hex(data)}  {path}")
    except Sha256Error as e:
        _fail(f"Error: {e}")


@app.command("selftest")
def selftest() -> None:
    """Check published vectors, and padding boundaries against the cryptography library."""
    _settings({})
    all_passed = True

    cases = [(name, data, expected) for name, data, expected in KNOWN_VECTORS]
    for n in BOUNDARY_LENGTHS:
        data = boundary_message(n)
        cases.append((f"length {n}", data, reference_digest(data).hex()))

    for name, data, expected in cases:
        result = sha256_hex(data)
        passed = result == expected
        all_passed = all_passed and passed
        typer.echo(f"{'PASS' if passed else 'FAIL'}  {name}")
        if not passed:
            typer.echo(f"  expected: {expected}", err=True)
            typer.echo(f"  got:      {result}", err=True)

    typer.echo("All tests passed!" if all_passed else "Some tests failed!")
    if not all_passed:
        raise typer.Exit(code=1)


def main() -> None:
    """Main entry point for ShaVault."""
    app()


if __name__ == "__main__":
    main()
