# --------------------------------------------------------------
# File: services.py
# Description: Servicios de alta, revelado y borrado de wallets cifradas.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que orquestan el códec de sobres.

La generación de claves de la cadena es un colaborador externo: cada alta
recibe un `keygen` que devuelve `(clave_privada, dirección)`.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import UTC, datetime
from typing import Callable, List, Optional, Tuple

from wallet_core.config import wallets_path
from wallet_core.crypto_kdf import PBKDF2_ITERATIONS
from wallet_core.crypto_sym import decrypt_payload, decrypt_to_string, encrypt_payload, encrypt_string
from wallet_core.errors import DecryptionError, WalletNotFoundError
from wallet_core.models import EncryptedPayload, StoredWallet
from wallet_core.password_policy import check_wallet_password
from wallet_core.storage import load_wallets, save_wallets

KeyGenerator = Callable[[], Tuple[str, str]]

REVEAL_FAILED = "Contraseña inválida o datos corruptos."
NOT_FOUND = "Wallet no encontrada."

logger = logging.getLogger(__name__)


def list_wallets() -> List[StoredWallet]:
    """Devuelve las wallets guardadas, la más reciente primero."""

    return load_wallets(wallets_path())


def get_wallet(wallet_id: str) -> StoredWallet:
    """Busca una wallet por identificador.

    Raises:
        WalletNotFoundError: Si no existe el registro.
    """

    for wallet in list_wallets():
        if wallet.id == wallet_id:
            return wallet
    raise WalletNotFoundError(wallet_id)


def _find(wallet_id: str) -> Optional[StoredWallet]:
    try:
        return get_wallet(wallet_id)
    except WalletNotFoundError:
        return None


def _new_record(address: str, enc: EncryptedPayload, label: Optional[str]) -> StoredWallet:
    return StoredWallet(
        id=str(uuid.uuid4()),
        address=address,
        enc=enc,
        created_at=datetime.now(UTC).isoformat(),
        label=label or None,
    )


def _store_new(wallet: StoredWallet) -> None:
    path = wallets_path()
    save_wallets([wallet, *load_wallets(path)], path)
    logger.info("Wallet %s creada", wallet.id)


def _remove(wallet_id: str) -> None:
    path = wallets_path()
    save_wallets([w for w in load_wallets(path) if w.id != wallet_id], path)
    logger.info("Wallet %s eliminada", wallet_id)


def _policy_rejection(password: str, confirm: str) -> Optional[str]:
    ok, reasons = check_wallet_password(password, confirm)
    if ok:
        return None
    return "La contraseña no es válida:\n- " + "\n- ".join(reasons)


def _create_debug() -> str:
    return f"[CREATE] PBKDF2-SHA256 it={PBKDF2_ITERATIONS} AES-GCM-256 nonce=96-bit salt=128-bit"


# SECURITY: la clave privada en claro nunca se persiste; sólo se guarda el sobre.
def create_wallet(
    password: str,
    confirm: str,
    keygen: KeyGenerator,
    label: Optional[str] = None,
) -> Tuple[bool, str, Optional[StoredWallet], str]:
    """Genera una cuenta, cifra su clave privada y guarda el registro.

    Args:
        password (str): Contraseña que protegerá la clave privada.
        confirm (str): Repetición de la contraseña.
        keygen (KeyGenerator): Productor externo de `(clave_privada, dirección)`.
        label (Optional[str]): Etiqueta opcional.

    Returns:
        Tuple[bool, str, Optional[StoredWallet], str]: Indicador de éxito,
        mensaje para la interfaz, registro creado y traza de depuración.

    """

    rejection = _policy_rejection(password, confirm)
    if rejection:
        return False, rejection, None, ""

    private_key, address = keygen()
    wallet = _new_record(address, encrypt_payload(private_key, password), label)
    _store_new(wallet)
    return True, "Wallet creada.", wallet, _create_debug()


def reveal_private_key(wallet_id: str, password: str) -> Tuple[bool, str, Optional[str], str]:
    """Descifra la clave privada de una wallet.

    Returns:
        Tuple[bool, str, Optional[str], str]: Indicador de éxito, mensaje,
        clave privada en claro y traza de depuración.
    """

    wallet = _find(wallet_id)
    if wallet is None:
        return False, NOT_FOUND, None, ""

    try:
        private_key = decrypt_payload(wallet.enc, password)
    except DecryptionError:
        return False, REVEAL_FAILED, None, "[REVEAL] tag AES-GCM no verificado"

    return True, "Clave privada revelada.", private_key, f"[REVEAL] ver={wallet.enc.version}"


def delete_wallet(wallet_id: str, password: str) -> Tuple[bool, str, str]:
    """Elimina una wallet tras comprobar la contraseña descifrando su sobre.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, mensaje y traza de depuración.
    """

    wallet = _find(wallet_id)
    if wallet is None:
        return False, NOT_FOUND, ""

    try:
        decrypt_payload(wallet.enc, password)
    except DecryptionError:
        return False, REVEAL_FAILED, "[DELETE] tag AES-GCM no verificado"

    _remove(wallet_id)
    return True, "Wallet eliminada.", f"[DELETE] id={wallet_id}"


# Las variantes asíncronas llevan tanto el códec como el acceso a disco a hilos.
async def create_wallet_async(
    password: str,
    confirm: str,
    keygen: KeyGenerator,
    label: Optional[str] = None,
) -> Tuple[bool, str, Optional[StoredWallet], str]:
    """Equivalente de `create_wallet` que no bloquea el bucle de eventos."""

    rejection = _policy_rejection(password, confirm)
    if rejection:
        return False, rejection, None, ""

    private_key, address = keygen()
    wallet = _new_record(address, await encrypt_string(private_key, password), label)
    await asyncio.to_thread(_store_new, wallet)
    return True, "Wallet creada.", wallet, _create_debug()


async def reveal_private_key_async(wallet_id: str, password: str) -> Tuple[bool, str, Optional[str], str]:
    """Equivalente de `reveal_private_key` que no bloquea el bucle de eventos."""

    wallet = await asyncio.to_thread(_find, wallet_id)
    if wallet is None:
        return False, NOT_FOUND, None, ""

    try:
        private_key = await decrypt_to_string(wallet.enc, password)
    except DecryptionError:
        return False, REVEAL_FAILED, None, "[REVEAL] tag AES-GCM no verificado"

    return True, "Clave privada revelada.", private_key, f"[REVEAL] ver={wallet.enc.version}"


async def delete_wallet_async(wallet_id: str, password: str) -> Tuple[bool, str, str]:
    """Equivalente de `delete_wallet` que no bloquea el bucle de eventos."""

    wallet = await asyncio.to_thread(_find, wallet_id)
    if wallet is None:
        return False, NOT_FOUND, ""

    try:
        await decrypt_to_string(wallet.enc, password)
    except DecryptionError:
        return False, REVEAL_FAILED, "[DELETE] tag AES-GCM no verificado"

    await asyncio.to_thread(_remove, wallet_id)
    return True, "Wallet eliminada.", f"[DELETE] id={wallet_id}"
