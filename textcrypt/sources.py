# --------------------------------------------------------------
# File: sources.py
# Description: Lectura completa de entradas desde fichero o stdin.
# --------------------------------------------------------------
"""Utilidades de entrada/salida para obtener los datos a procesar."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

from textcrypt.config import get_settings
from textcrypt.errors import SourceReadError

__all__ = ["STDIN", "Source", "read_input"]

logger = logging.getLogger(__name__)

STDIN = "-"

Source = Union[str, os.PathLike, bytes]


def _check_size(data: bytes, limit: int, label: str) -> bytes:
    if limit and len(data) > limit:
        raise SourceReadError(f"{label}: {len(data)} bytes superan el máximo de {limit}")
    return data


def read_input(source: Source, max_bytes: Optional[int] = None) -> bytes:
    """Lee por completo una fuente de datos.

    Args:
        source (Source): Ruta de fichero, `-` para stdin o un buffer ya en memoria.
        max_bytes (Optional[int]): Tope de tamaño; por defecto el de la configuración.

    Returns:
        bytes: Contenido íntegro de la fuente.

    Raises:
        SourceReadError: Si la fuente no se puede leer o supera el tope.

    """

    limit = get_settings().max_input_bytes if max_bytes is None else max_bytes

    if isinstance(source, (bytes, bytearray)):
        return _check_size(bytes(source), limit, "buffer")

    if os.fspath(source) == STDIN:
        logger.debug("Leyendo la entrada desde stdin")
        stream = getattr(sys.stdin, "buffer", sys.stdin)
        data = stream.read(limit + 1) if limit else stream.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return _check_size(data, limit, "stdin")

    path = os.fspath(source)
    try:
        with open(path, "rb") as handler:
            data = handler.read(limit + 1) if limit else handler.read()
    except OSError as exc:
        raise SourceReadError(f"No se puede leer {path}: {exc.strerror or exc}") from exc
    logger.debug("Leídos %d bytes de %s", len(data), path)
    return _check_size(data, limit, path)
