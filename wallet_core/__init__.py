# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de sobres y sus modelos.
# --------------------------------------------------------------
"""Inicializa el paquete `wallet_core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_kdf",
    "crypto_sym",
    "errors",
    "models",
    "password_policy",
    "storage",
    "utils",
]
