# --------------------------------------------------------------
# File: encoding.py
# Description: Codificación Base64 para transportar valores binarios como texto.
# --------------------------------------------------------------
"""Texto de transporte (Base64 URL-safe sin relleno) y utilidades Base64."""

from __future__ import annotations

import base64
import binascii
import re
from enum import Enum

from textcrypt.errors import EncodingError
from textcrypt.sources import Source, read_input

__all__ = [
    "Base64Format",
    "decode_transport",
    "encode_transport",
    "process_b64_decode",
    "process_b64_encode",
]

_URLSAFE_RE = re.compile(r"[A-Za-z0-9_-]*")
_STANDARD_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")


class Base64Format(str, Enum):
    """Alfabetos Base64 disponibles en la utilidad de línea de comandos."""

    STANDARD = "standard"
    URLSAFE = "urlsafe"


def encode_transport(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno.

    Args:
        data (bytes): Datos binarios a convertir.

    Returns:
        str: Representación codificada sin caracteres de relleno.
    """

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_transport(value: str) -> bytes:
    """Decodifica una cadena Base64 URL-safe sin relleno.

    Args:
        value (str): Cadena codificada sin relleno.

    Returns:
        bytes: Datos originales en formato binario.

    Raises:
        EncodingError: Si la cadena contiene caracteres ajenos al alfabeto
            o una longitud imposible.
    """

    if not _URLSAFE_RE.fullmatch(value) or len(value) % 4 == 1:
        raise EncodingError("Texto de transporte no es Base64 URL-safe válido")
    try:
        return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"Texto de transporte inválido: {exc}") from exc


def process_b64_encode(source: Source, fmt: Base64Format = Base64Format.STANDARD) -> str:
    """Lee una entrada completa y la devuelve codificada en Base64."""

    data = read_input(source)
    if Base64Format(fmt) is Base64Format.URLSAFE:
        return encode_transport(data)
    return base64.b64encode(data).decode("ascii")


def process_b64_decode(source: Source, fmt: Base64Format = Base64Format.STANDARD) -> bytes:
    """Lee texto Base64 de una entrada y devuelve los bytes originales.

    Se eliminan los espacios y saltos de línea que rodean al texto.
    """

    try:
        text = read_input(source).decode("ascii").strip()
    except UnicodeDecodeError as exc:
        raise EncodingError("La entrada Base64 contiene bytes no ASCII") from exc
    if Base64Format(fmt) is Base64Format.URLSAFE:
        return decode_transport(text)
    if not _STANDARD_RE.fullmatch(text):
        raise EncodingError("Texto Base64 estándar inválido")
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise EncodingError(f"Texto Base64 estándar inválido: {exc}") from exc
