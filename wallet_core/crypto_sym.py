# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Cifrado y descifrado de sobres AES-GCM protegidos por contraseña.
# --------------------------------------------------------------
"""Códec de sobres: cadena + contraseña <-> `EncryptedPayload`."""

import asyncio
import base64
import os

from cryptography.exceptions import InvalidTag

from wallet_core.crypto_kdf import SALT_LENGTH, derive_key
from wallet_core.errors import DecryptionError, EnvelopeError
from wallet_core.models import PAYLOAD_VERSION, EncryptedPayload

NONCE_LENGTH = 12  # 96 bits, nonce estándar de GCM


def _b64(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def _unb64(value: str) -> bytes:
    """Decodifica Base64 estándar rechazando caracteres fuera del alfabeto."""

    return base64.b64decode(value, validate=True)


def encrypt_payload(plaintext: str, password: str) -> EncryptedPayload:
    """Cifra una cadena con una clave derivada de la contraseña.

    Cada llamada genera un nonce y una salt nuevos e independientes, por lo
    que dos sobres del mismo texto y contraseña nunca coinciden.

    Args:
        plaintext (str): Secreto en claro; la cadena vacía está permitida.
        password (str): Contraseña del usuario.

    Returns:
        EncryptedPayload: Sobre listo para persistir.

    Raises:
        EnvelopeError: Si la primitiva rechaza los parámetros.

    """

    iv = os.urandom(NONCE_LENGTH)
    salt = os.urandom(SALT_LENGTH)
    try:
        aes = derive_key(password, salt)
        ciphertext = aes.encrypt(iv, plaintext.encode("utf-8"), None)
    except (ValueError, OverflowError) as exc:
        raise EnvelopeError("envelope encryption failed") from exc

    return EncryptedPayload(
        ciphertext=_b64(ciphertext),
        iv=_b64(iv),
        salt=_b64(salt),
        version=PAYLOAD_VERSION,
    )


def decrypt_payload(payload: EncryptedPayload, password: str) -> str:
    """Descifra un sobre y devuelve el texto original verificado.

    Contraseña incorrecta, sobre manipulado y Base64 inválido producen el
    mismo `DecryptionError`, sin causa encadenada ni texto parcial.

    Args:
        payload (EncryptedPayload): Sobre generado por `encrypt_payload`.
        password (str): Contraseña candidata.

    Returns:
        str: Texto en claro original.

    Raises:
        DecryptionError: Si el tag no verifica o algún campo es inválido.

    """

    try:
        iv = _unb64(payload.iv)
        salt = _unb64(payload.salt)
        ciphertext = _unb64(payload.ciphertext)
        # Los errores de formato salen antes de PBKDF2: el tiempo sólo revela un
        # sobre malformado, nunca si la contraseña era correcta.
        if len(iv) != NONCE_LENGTH:
            raise ValueError("bad nonce length")
        aes = derive_key(password, salt)
        plain = aes.decrypt(iv, ciphertext, None)
        return plain.decode("utf-8")
    except (InvalidTag, ValueError):
        raise DecryptionError() from None


async def encrypt_string(plaintext: str, password: str) -> EncryptedPayload:
    """Versión asíncrona de `encrypt_payload` ejecutada en un hilo aparte."""

    return await asyncio.to_thread(encrypt_payload, plaintext, password)


async def decrypt_to_string(payload: EncryptedPayload, password: str) -> str:
    """Versión asíncrona de `decrypt_payload` ejecutada en un hilo aparte."""

    return await asyncio.to_thread(decrypt_payload, payload, password)
