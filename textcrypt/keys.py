# --------------------------------------------------------------
# File: keys.py
# Description: Carga y generación de material de clave por algoritmo.
# --------------------------------------------------------------
"""Construcción de claves tipadas a partir de ficheros, buffers o azar seguro."""

from __future__ import annotations

import logging
import os
from typing import Callable, Dict, List, Tuple, Type

from cryptography.hazmat.primitives.asymmetric import ed25519

from textcrypt.errors import SourceReadError, UnsupportedOperationError
from textcrypt.models import (
    KEY_SIZE,
    AlgorithmTag,
    Blake3Key,
    ChaCha20Poly1305Key,
    Ed25519SigningKey,
    Ed25519VerifyingKey,
    KeyRole,
    _RawKey,
)
from textcrypt.sources import STDIN, Source, read_input

__all__ = ["RandomSource", "generate_keys", "key_class", "key_filenames", "load_key"]

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]

# Clases de clave por (algoritmo, rol).
_KEY_TYPES: Dict[Tuple[AlgorithmTag, KeyRole], Type[_RawKey]] = {
    (AlgorithmTag.BLAKE3, KeyRole.SIGNER): Blake3Key,
    (AlgorithmTag.BLAKE3, KeyRole.VERIFIER): Blake3Key,
    (AlgorithmTag.ED25519, KeyRole.SIGNER): Ed25519SigningKey,
    (AlgorithmTag.ED25519, KeyRole.VERIFIER): Ed25519VerifyingKey,
    (AlgorithmTag.CHACHA20POLY1305, KeyRole.SIGNER): ChaCha20Poly1305Key,
    (AlgorithmTag.CHACHA20POLY1305, KeyRole.VERIFIER): ChaCha20Poly1305Key,
}

_FILENAMES: Dict[AlgorithmTag, Tuple[str, ...]] = {
    AlgorithmTag.BLAKE3: ("blake3.key",),
    AlgorithmTag.ED25519: ("ed25519.sk", "ed25519.pk"),
    AlgorithmTag.CHACHA20POLY1305: ("chacha20poly1305.key",),
}


def key_class(tag: AlgorithmTag, role: KeyRole) -> Type[_RawKey]:
    """Devuelve la clase de clave que corresponde a `(tag, role)`."""

    try:
        return _KEY_TYPES[(AlgorithmTag(tag), KeyRole(role))]
    except (KeyError, ValueError) as exc:
        raise UnsupportedOperationError(f"Sin clave para {tag}/{role}") from exc


def load_key(source: Source, tag: AlgorithmTag, role: KeyRole) -> _RawKey:
    """Carga una clave cruda y la envuelve en su tipo fuerte.

    Args:
        source (Source): Ruta del fichero de clave o los bytes ya leídos.
        tag (AlgorithmTag): Algoritmo al que pertenece la clave.
        role (KeyRole): Rol con el que se usará (firmante o verificador).

    Returns:
        _RawKey: Instancia inmutable del tipo de clave correspondiente.

    Raises:
        SourceReadError: Si el fichero no se puede leer.
        KeyFormatError: Si la longitud no coincide con la esperada.

    """

    cls = key_class(tag, role)
    if not isinstance(source, (bytes, bytearray)) and os.fspath(source) == STDIN:
        raise SourceReadError("La clave no puede leerse desde stdin")
    # Sin tope: una clave de tamaño incorrecto debe fallar por formato, no por lectura.
    raw = read_input(source, max_bytes=0)
    key = cls(raw=raw)
    logger.debug("Clave %s cargada para %s/%s", cls.__name__, tag, role)
    return key


def generate_keys(tag: AlgorithmTag, rand: RandomSource = os.urandom) -> List[bytes]:
    """Genera material de clave nuevo con una fuente aleatoria segura.

    Args:
        tag (AlgorithmTag): Algoritmo para el que se genera la clave.
        rand (RandomSource): Fuente de bytes aleatorios; `os.urandom` por defecto.

    Returns:
        List[bytes]: `[clave]` para algoritmos simétricos o
        `[clave_privada, clave_publica]` para Ed25519.

    """

    tag = AlgorithmTag.parse(tag)
    if tag is AlgorithmTag.ED25519:
        seed = Ed25519SigningKey(raw=rand(KEY_SIZE))
        private_key = ed25519.Ed25519PrivateKey.from_private_bytes(seed.raw)
        public = private_key.public_key().public_bytes_raw()
        return [seed.raw, Ed25519VerifyingKey(raw=public).raw]
    if tag is AlgorithmTag.BLAKE3:
        return [Blake3Key(raw=rand(KEY_SIZE)).raw]
    if tag is AlgorithmTag.CHACHA20POLY1305:
        return [ChaCha20Poly1305Key(raw=rand(KEY_SIZE)).raw]
    raise UnsupportedOperationError(f"No se pueden generar claves para {tag}")


def key_filenames(tag: AlgorithmTag) -> Tuple[str, ...]:
    """Nombres fijos con los que se persisten las claves generadas."""

    return _FILENAMES[AlgorithmTag.parse(tag)]
