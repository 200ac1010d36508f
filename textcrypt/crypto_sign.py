# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Funciones para gestionar claves y firmas Ed25519.
# --------------------------------------------------------------
"""Abstracciones criptográficas para firma y validación Ed25519."""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from textcrypt.errors import KeyFormatError, MalformedInputError
from textcrypt.models import SIGNATURE_SIZE, Ed25519SigningKey, Ed25519VerifyingKey


def ed25519_public_key(signing_key: Ed25519SigningKey) -> Ed25519VerifyingKey:
    """Deriva la clave pública asociada a una semilla privada Ed25519."""

    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(signing_key.raw)
    return Ed25519VerifyingKey(raw=private_key.public_key().public_bytes_raw())


def ed25519_sign(signing_key: Ed25519SigningKey, message: bytes) -> bytes:
    """Firma un mensaje con la clave privada Ed25519 proporcionada.

    Args:
        signing_key (Ed25519SigningKey): Semilla privada de 32 bytes.
        message (bytes): Mensaje que se firmará.

    Returns:
        bytes: Firma Ed25519 de 64 bytes.

    """

    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(signing_key.raw)
    return private_key.sign(message)


def ed25519_verify(verifying_key: Ed25519VerifyingKey, message: bytes, signature: bytes) -> bool:
    """Verifica una firma Ed25519 devolviendo el resultado como booleano.

    Args:
        verifying_key (Ed25519VerifyingKey): Clave pública de 32 bytes.
        message (bytes): Mensaje original firmado.
        signature (bytes): Firma a verificar.

    Returns:
        bool: True solo si la firma es válida para este mensaje y esta clave.

    Raises:
        MalformedInputError: Si la firma no mide exactamente 64 bytes.
        KeyFormatError: Si la clave pública no es un punto válido de la curva.

    """

    if len(signature) != SIGNATURE_SIZE:
        raise MalformedInputError(
            f"La firma Ed25519 debe tener {SIGNATURE_SIZE} bytes, recibidos {len(signature)}"
        )
    try:
        public_key = ed25519.Ed25519PublicKey.from_public_bytes(verifying_key.raw)
    except ValueError as exc:
        raise KeyFormatError(f"Clave pública Ed25519 inválida: {exc}") from exc
    try:
        public_key.verify(signature, message)
    except InvalidSignature:
        return False
    return True
