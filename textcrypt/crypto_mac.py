# --------------------------------------------------------------
# File: crypto_mac.py
# Description: Autenticación de mensajes con el hash con clave de BLAKE3.
# --------------------------------------------------------------
"""Firma y verificación simétrica basada en BLAKE3 en modo keyed hash."""

import hmac

from blake3 import blake3

from textcrypt.models import DIGEST_SIZE, Blake3Key


def blake3_sign(key: Blake3Key, data: bytes) -> bytes:
    """Calcula el digest BLAKE3 con clave de un mensaje completo.

    Args:
        key (Blake3Key): Clave simétrica de 256 bits.
        data (bytes): Mensaje que se autentica.

    Returns:
        bytes: Digest determinista de 32 bytes.

    """

    return blake3(data, key=key.raw).digest()


def blake3_verify(key: Blake3Key, data: bytes, digest: bytes) -> bool:
    """Recalcula el digest y lo compara en tiempo constante.

    Args:
        key (Blake3Key): Clave simétrica con la que se firmó.
        data (bytes): Mensaje recibido.
        digest (bytes): Digest que acompaña al mensaje.

    Returns:
        bool: True si coincide; False ante cualquier diferencia.

    """

    if len(digest) != DIGEST_SIZE:
        return False
    return hmac.compare_digest(blake3_sign(key, data), digest)
