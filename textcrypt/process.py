# --------------------------------------------------------------
# File: process.py
# Description: Orquestación de firma, verificación, cifrado y generación de claves.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que despachan cada operación a su motor."""

from __future__ import annotations

import logging
import os
from typing import List

from textcrypt.crypto_mac import blake3_sign, blake3_verify
from textcrypt.crypto_sign import ed25519_sign, ed25519_verify
from textcrypt.crypto_sym import chacha_decrypt, chacha_encrypt
from textcrypt.encoding import decode_transport, encode_transport
from textcrypt.errors import EncodingError, UnsupportedOperationError
from textcrypt.keys import RandomSource, generate_keys, load_key
from textcrypt.models import AlgorithmTag, KeyRole
from textcrypt.sources import Source, read_input

__all__ = [
    "process_decrypt",
    "process_decrypt_bytes",
    "process_encrypt",
    "process_generate",
    "process_sign",
    "process_verify",
]

logger = logging.getLogger(__name__)


def process_sign(input_source: Source, key_source: Source, tag: AlgorithmTag) -> str:
    """Firma una entrada completa y devuelve la firma como texto de transporte.

    Args:
        input_source (Source): Fichero, `-` (stdin) o buffer con los datos.
        key_source (Source): Fichero o buffer con la clave del firmante.
        tag (AlgorithmTag): `blake3` o `ed25519`.

    Returns:
        str: Firma o digest codificado en Base64 URL-safe sin relleno.

    Raises:
        UnsupportedOperationError: Si el algoritmo es de cifrado.

    """

    tag = AlgorithmTag.parse(tag)
    if tag is AlgorithmTag.CHACHA20POLY1305:
        raise UnsupportedOperationError(f"{tag} no permite firmar; usa encrypt")

    key = load_key(key_source, tag, KeyRole.SIGNER)
    data = read_input(input_source)
    if tag is AlgorithmTag.BLAKE3:
        signature = blake3_sign(key, data)
    else:
        signature = ed25519_sign(key, data)
    logger.info("Firmados %d bytes con %s", len(data), tag)
    return encode_transport(signature)


def process_verify(
    input_source: Source, key_source: Source, tag: AlgorithmTag, signature_text: str
) -> bool:
    """Verifica la firma de una entrada.

    La discrepancia de firma es un resultado normal (`False`), no un error.

    Args:
        input_source (Source): Fichero, `-` (stdin) o buffer con los datos.
        key_source (Source): Fichero o buffer con la clave del verificador.
        tag (AlgorithmTag): `blake3` o `ed25519`.
        signature_text (str): Firma en texto de transporte.

    Returns:
        bool: True si la firma corresponde a los datos y la clave.

    """

    tag = AlgorithmTag.parse(tag)
    if tag is AlgorithmTag.CHACHA20POLY1305:
        raise UnsupportedOperationError(f"{tag} no permite verificar firmas")

    signature = decode_transport(signature_text.strip())
    key = load_key(key_source, tag, KeyRole.VERIFIER)
    data = read_input(input_source)
    if tag is AlgorithmTag.BLAKE3:
        verified = blake3_verify(key, data, signature)
    else:
        verified = ed25519_verify(key, data, signature)
    logger.info("Verificación %s sobre %d bytes: %s", tag, len(data), verified)
    return verified


def process_generate(tag: AlgorithmTag, rand: RandomSource = os.urandom) -> List[bytes]:
    """Genera claves nuevas sin persistirlas."""

    return generate_keys(AlgorithmTag.parse(tag), rand)


def process_encrypt(
    input_source: Source, key_source: Source, rand: RandomSource = os.urandom
) -> str:
    """Cifra una entrada con ChaCha20-Poly1305 y devuelve el sobre codificado.

    Args:
        input_source (Source): Fichero, `-` (stdin) o buffer con el texto en claro.
        key_source (Source): Fichero o buffer con la clave simétrica.
        rand (RandomSource): Fuente aleatoria para el nonce.

    Returns:
        str: Sobre `nonce || ciphertext || tag` en texto de transporte.

    """

    key = load_key(key_source, AlgorithmTag.CHACHA20POLY1305, KeyRole.SIGNER)
    data = read_input(input_source)
    envelope = chacha_encrypt(key, data, rand)
    logger.info("Cifrados %d bytes", len(data))
    return encode_transport(envelope)


def process_decrypt_bytes(input_source: Source, key_source: Source) -> bytes:
    """Descifra un sobre en texto de transporte y devuelve los bytes en claro."""

    key = load_key(key_source, AlgorithmTag.CHACHA20POLY1305, KeyRole.VERIFIER)
    raw = read_input(input_source)
    try:
        text = raw.decode("ascii").strip()
    except UnicodeDecodeError as exc:
        raise EncodingError("El sobre cifrado no es texto de transporte") from exc
    plaintext = chacha_decrypt(key, decode_transport(text))
    logger.info("Descifrados %d bytes", len(plaintext))
    return plaintext


def process_decrypt(input_source: Source, key_source: Source) -> str:
    """Descifra un sobre e interpreta el resultado como texto UTF-8.

    Raises:
        EncodingError: Si el texto en claro no es UTF-8 válido.

    """

    plaintext = process_decrypt_bytes(input_source, key_source)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError("El texto descifrado no es UTF-8; usa --raw") from exc
