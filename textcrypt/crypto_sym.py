# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas ChaCha20-Poly1305 para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado para proteger datos arbitrarios."""

import os
from typing import Callable

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from textcrypt.errors import AuthenticationError
from textcrypt.models import NONCE_SIZE, ChaCha20Poly1305Key, CipherEnvelope


def chacha_encrypt(
    key: ChaCha20Poly1305Key,
    plaintext: bytes,
    rand: Callable[[int], bytes] = os.urandom,
) -> bytes:
    """Cifra datos con ChaCha20-Poly1305 usando un nonce aleatorio nuevo.

    Args:
        key (ChaCha20Poly1305Key): Clave simétrica de 256 bits.
        plaintext (bytes): Datos en claro que se cifrarán.
        rand (Callable[[int], bytes]): Fuente aleatoria para el nonce.

    Returns:
        bytes: Sobre `nonce || ciphertext || tag`.

    """

    nonce = rand(NONCE_SIZE)
    sealed = ChaCha20Poly1305(key.raw).encrypt(nonce, plaintext, None)
    return CipherEnvelope(nonce=nonce, sealed=sealed).to_bytes()


def chacha_decrypt(key: ChaCha20Poly1305Key, envelope: bytes) -> bytes:
    """Descifra un sobre ChaCha20-Poly1305 comprobando su etiqueta.

    Args:
        key (ChaCha20Poly1305Key): Clave simétrica que protege los datos.
        envelope (bytes): Sobre completo con el nonce al principio.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        MalformedInputError: Si el sobre es más corto que el nonce.
        AuthenticationError: Si la etiqueta no verifica.

    """

    parsed = CipherEnvelope.from_bytes(envelope)
    try:
        return ChaCha20Poly1305(key.raw).decrypt(parsed.nonce, parsed.sealed, None)
    except InvalidTag as exc:
        raise AuthenticationError("El sobre cifrado no supera la autenticación") from exc
