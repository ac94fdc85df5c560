# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES-GCM a partir de la contraseña.
# --------------------------------------------------------------
"""Derivación PBKDF2-SHA256 de la clave que protege cada sobre."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

PBKDF2_ITERATIONS = 150_000
KEY_LENGTH = 32  # AES-256
SALT_LENGTH = 16


def derive_key(password: str, salt: bytes) -> AESGCM:
    """Deriva la clave simétrica del sobre y la entrega como manejador AES-GCM.

    La clave en bruto sólo vive dentro de esta llamada; quien la invoca recibe
    un objeto `AESGCM` que cifra y descifra pero no expone los bytes.

    Args:
        password (str): Contraseña del usuario; no se impone longitud mínima.
        salt (bytes): Salt aleatoria de 16 bytes guardada junto al sobre.

    Returns:
        AESGCM: Manejador listo para cifrar o descifrar este sobre.

    Raises:
        ValueError: Si la salt no mide 16 bytes.

    """

    # Falla antes de derivar; sólo delata una salt malformada.
    if len(salt) != SALT_LENGTH:
        raise ValueError("salt must be 16 bytes")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return AESGCM(kdf.derive(password.encode("utf-8")))
