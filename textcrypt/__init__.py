# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete textcrypt.
# --------------------------------------------------------------
"""Inicializa el paquete `textcrypt` y documenta sus módulos principales."""

__all__ = [
    "cli",
    "config",
    "crypto_mac",
    "crypto_sign",
    "crypto_sym",
    "encoding",
    "errors",
    "keys",
    "models",
    "process",
    "sources",
]
