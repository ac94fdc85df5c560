# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del organizador de wallets.
# --------------------------------------------------------------
"""Excepciones compartidas por el códec de sobres y la capa de servicios."""


class WalletError(Exception):
    """Error base del paquete `wallet_core`."""


class EnvelopeError(WalletError):
    """Fallo inesperado de la primitiva criptográfica al cifrar o derivar.

    No es recuperable por el usuario: indica parámetros rechazados por la
    librería subyacente, algo que no ocurre con la configuración fija.
    """


class DecryptionError(WalletError):
    """El sobre no pudo descifrarse.

    Agrupa contraseña incorrecta, datos manipulados y codificación inválida
    en un único tipo sin causa encadenada.
    """

    def __init__(self) -> None:
        super().__init__("decryption failed")


class WalletNotFoundError(WalletError):
    """No existe ninguna wallet con el identificador solicitado."""
