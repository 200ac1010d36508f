# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones tipadas del núcleo criptográfico.
# --------------------------------------------------------------
"""Errores de dominio que el núcleo propaga hacia quien lo invoca."""


class TextCryptError(Exception):
    """Error base de todas las operaciones de textcrypt."""


class SourceReadError(TextCryptError):
    """La fuente de datos o de clave no se ha podido leer."""


class KeyFormatError(TextCryptError):
    """La longitud de la clave no corresponde al algoritmo o al rol."""


class MalformedInputError(TextCryptError):
    """Firma o sobre cifrado con una longitud imposible para su tipo."""


class AuthenticationError(TextCryptError):
    """La etiqueta AEAD no verifica; nunca se devuelve texto en claro."""


class EncodingError(TextCryptError):
    """Texto de transporte inválido o contenido que no es UTF-8."""


class ConfigError(TextCryptError):
    """Una variable de configuración tiene un valor inválido."""


class UnsupportedOperationError(TextCryptError):
    """El algoritmo indicado no admite la operación solicitada."""


__all__ = [
    "AuthenticationError",
    "ConfigError",
    "EncodingError",
    "KeyFormatError",
    "MalformedInputError",
    "SourceReadError",
    "TextCryptError",
    "UnsupportedOperationError",
]
