# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos construida con Typer.
# --------------------------------------------------------------
"""Comandos `textcrypt` que delegan en la capa de orquestación."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from textcrypt.config import get_settings
from textcrypt.encoding import Base64Format, process_b64_decode, process_b64_encode
from textcrypt.errors import TextCryptError
from textcrypt.keys import key_filenames
from textcrypt.models import AlgorithmTag
from textcrypt.process import (
    process_decrypt,
    process_decrypt_bytes,
    process_encrypt,
    process_generate,
    process_sign,
    process_verify,
)
from textcrypt.sources import STDIN

app = typer.Typer(add_completion=False, help="Firma, verifica y cifra texto y ficheros.")
base64_app = typer.Typer(add_completion=False, help="Codifica y decodifica Base64.")
app.add_typer(base64_app, name="base64")

logger = logging.getLogger(__name__)

KEY_OPTION = typer.Option(..., "--key", "-k", exists=True, dir_okay=False, help="Fichero de clave.")
INPUT_OPTION = typer.Option(STDIN, "--input", "-i", help="Fichero de entrada o '-' para stdin.")


def _default_format() -> AlgorithmTag:
    return AlgorithmTag.parse(get_settings().default_format)


def _fail(exc: TextCryptError) -> NoReturn:
    logger.debug("Operación abortada", exc_info=exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Logging detallado.")) -> None:
    """Configura el logging antes de ejecutar cualquier subcomando."""

    try:
        settings = get_settings()
    except TextCryptError as exc:
        _fail(exc)
    level = "DEBUG" if verbose else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def write_keys(tag: AlgorithmTag, keys: List[bytes], output_dir: Path) -> List[Path]:
    """Guarda las claves generadas con los nombres fijos del algoritmo.

    Args:
        tag (AlgorithmTag): Algoritmo de las claves.
        keys (List[bytes]): Claves en el orden devuelto por la generación.
        output_dir (Path): Directorio existente donde se escriben.

    Returns:
        List[Path]: Rutas de los ficheros escritos.

    """

    written = []
    for name, blob in zip(key_filenames(tag), keys):
        path = output_dir / name
        path.write_bytes(blob)
        written.append(path)
    return written


@app.command()
def sign(
    key: Path = KEY_OPTION,
    input_path: str = INPUT_OPTION,
    fmt: Optional[AlgorithmTag] = typer.Option(None, "--format", help="blake3 o ed25519."),
) -> None:
    """Firma la entrada con una clave privada o simétrica."""

    try:
        signed = process_sign(input_path, key, fmt or _default_format())
    except TextCryptError as exc:
        _fail(exc)
    typer.echo(signed)


@app.command()
def verify(
    key: Path = KEY_OPTION,
    input_path: str = INPUT_OPTION,
    fmt: Optional[AlgorithmTag] = typer.Option(None, "--format", help="blake3 o ed25519."),
    sig: str = typer.Option(..., "--sig", "-s", help="Firma en Base64 URL-safe."),
) -> None:
    """Verifica la firma de la entrada."""

    try:
        verified = process_verify(input_path, key, fmt or _default_format(), sig)
    except TextCryptError as exc:
        _fail(exc)
    typer.echo("Firma verificada" if verified else "Firma no verificada")


@app.command()
def generate(
    fmt: Optional[AlgorithmTag] = typer.Option(None, "--format", help="Algoritmo de la clave."),
    output: Path = typer.Option(
        ..., "--output", "-o", exists=True, file_okay=False, help="Directorio de salida."
    ),
) -> None:
    """Genera una clave nueva y la guarda en el directorio indicado."""

    try:
        tag = fmt or _default_format()
        keys = process_generate(tag)
        paths = write_keys(tag, keys, output)
    except TextCryptError as exc:
        _fail(exc)
    except OSError as exc:
        typer.echo(f"Error: no se pudo escribir la clave: {exc}", err=True)
        raise typer.Exit(code=1)
    for path in paths:
        logger.info("Clave escrita en %s", path)


@app.command()
def encrypt(key: Path = KEY_OPTION, input_path: str = INPUT_OPTION) -> None:
    """Cifra la entrada con ChaCha20-Poly1305."""

    try:
        encrypted = process_encrypt(input_path, key)
    except TextCryptError as exc:
        _fail(exc)
    typer.echo(encrypted)


@app.command()
def decrypt(
    key: Path = KEY_OPTION,
    input_path: str = INPUT_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Escribe los bytes descifrados sin interpretarlos."),
) -> None:
    """Descifra un sobre producido por `encrypt`."""

    try:
        if raw:
            data = process_decrypt_bytes(input_path, key)
        else:
            text = process_decrypt(input_path, key)
    except TextCryptError as exc:
        _fail(exc)
    if raw:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
    else:
        typer.echo(text)


@base64_app.command("encode")
def b64_encode(
    input_path: str = INPUT_OPTION,
    fmt: Base64Format = typer.Option(Base64Format.STANDARD, "--format", help="standard o urlsafe."),
) -> None:
    """Codifica la entrada en Base64."""

    try:
        encoded = process_b64_encode(input_path, fmt)
    except TextCryptError as exc:
        _fail(exc)
    typer.echo(encoded)


@base64_app.command("decode")
def b64_decode(
    input_path: str = INPUT_OPTION,
    fmt: Base64Format = typer.Option(Base64Format.STANDARD, "--format", help="standard o urlsafe."),
) -> None:
    """Decodifica texto Base64 y escribe los bytes resultantes."""

    try:
        decoded = process_b64_decode(input_path, fmt)
    except TextCryptError as exc:
        _fail(exc)
    sys.stdout.buffer.write(decoded)
    sys.stdout.flush()
