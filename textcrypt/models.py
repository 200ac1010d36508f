# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan algoritmos, claves y sobres cifrados."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textcrypt.errors import KeyFormatError, MalformedInputError, UnsupportedOperationError

KEY_SIZE = 32
DIGEST_SIZE = 32
SIGNATURE_SIZE = 64
NONCE_SIZE = 12
TAG_SIZE = 16


class AlgorithmTag(str, Enum):
    """Familias de primitivas soportadas, identificadas por su nombre en la CLI."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"
    CHACHA20POLY1305 = "chacha20poly1305"

    @classmethod
    def parse(cls, name: str) -> "AlgorithmTag":
        """Convierte un nombre textual en la etiqueta de algoritmo.

        Args:
            name (str): Nombre del algoritmo, sin distinguir mayúsculas.

        Returns:
            AlgorithmTag: Etiqueta correspondiente.

        Raises:
            UnsupportedOperationError: Si el nombre no es un algoritmo conocido.

        """

        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            raise UnsupportedOperationError(f"Formato no soportado: {name}") from exc

    def __str__(self) -> str:
        return self.value


class KeyRole(str, Enum):
    """Rol con el que se carga una clave."""

    SIGNER = "signer"
    VERIFIER = "verifier"


class _RawKey(BaseModel):
    """Envoltorio inmutable de bytes de clave con longitud exacta."""

    model_config = ConfigDict(frozen=True, strict=True)

    KEY_SIZE: ClassVar[int] = KEY_SIZE
    ALGORITHM: ClassVar[AlgorithmTag]

    raw: bytes = Field(repr=False)

    @field_validator("raw")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if len(value) != cls.KEY_SIZE:
            raise KeyFormatError(
                f"{cls.__name__} requiere {cls.KEY_SIZE} bytes, recibidos {len(value)}"
            )
        return value


class Blake3Key(_RawKey):
    """Clave simétrica de 256 bits para el hash con clave BLAKE3."""

    ALGORITHM: ClassVar[AlgorithmTag] = AlgorithmTag.BLAKE3


class Ed25519SigningKey(_RawKey):
    """Semilla privada Ed25519 de 32 bytes; solo sirve para firmar."""

    ALGORITHM: ClassVar[AlgorithmTag] = AlgorithmTag.ED25519


class Ed25519VerifyingKey(_RawKey):
    """Clave pública Ed25519 de 32 bytes; solo sirve para verificar."""

    ALGORITHM: ClassVar[AlgorithmTag] = AlgorithmTag.ED25519


class ChaCha20Poly1305Key(_RawKey):
    """Clave simétrica de 256 bits para ChaCha20-Poly1305."""

    ALGORITHM: ClassVar[AlgorithmTag] = AlgorithmTag.CHACHA20POLY1305


class CipherEnvelope(BaseModel):
    """Representa el resultado de una operación ChaCha20-Poly1305.

    Attributes:
        nonce (bytes): Nonce aleatorio de 96 bits usado en el cifrado.
        sealed (bytes): Ciphertext seguido de la etiqueta Poly1305.

    """

    model_config = ConfigDict(frozen=True, strict=True)

    nonce: bytes = Field(min_length=NONCE_SIZE, max_length=NONCE_SIZE)
    sealed: bytes

    def to_bytes(self) -> bytes:
        """Serializa el sobre como `nonce || ciphertext || tag`."""

        return self.nonce + self.sealed

    @classmethod
    def from_bytes(cls, blob: bytes) -> "CipherEnvelope":
        """Separa nonce y datos sellados de un sobre serializado.

        Args:
            blob (bytes): Sobre completo recibido del exterior.

        Returns:
            CipherEnvelope: Sobre con el nonce y el resto separados.

        Raises:
            MalformedInputError: Si el sobre no llega a contener el nonce.

        """

        if len(blob) < NONCE_SIZE:
            raise MalformedInputError(
                f"Sobre cifrado demasiado corto: {len(blob)} bytes, mínimo {NONCE_SIZE}"
            )
        return cls(nonce=blob[:NONCE_SIZE], sealed=blob[NONCE_SIZE:])
