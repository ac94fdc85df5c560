# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas de integración del alta, revelado y borrado de wallets.
# --------------------------------------------------------------

import json

from wallet_api import services
from wallet_core.config import wallets_path
from wallet_core.crypto_kdf import PBKDF2_ITERATIONS

PASSWORD = "passw0rd-12345"


def test_create_and_reveal_happy_path(keygen):
    """Valida el flujo de alta seguido de un revelado correcto.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: Las aserciones verifican el registro y la clave recuperada.
    """
    ok, msg, wallet, dbg = services.create_wallet(PASSWORD, PASSWORD, keygen, label="Ahorros")
    assert ok, msg
    assert wallet.address == "0x" + "0" * 39 + "1"
    assert wallet.label == "Ahorros"
    assert "PBKDF2" in dbg

    ok2, msg2, private_key, _ = services.reveal_private_key(wallet.id, PASSWORD)
    assert ok2, msg2
    assert private_key == "0x" + "0" * 63 + "1"


def test_private_key_is_never_persisted(keygen):
    """Comprueba que el archivo guardado no contenga la clave privada ni la contraseña.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: Las aserciones inspeccionan el JSON en disco.
    """
    services.create_wallet(PASSWORD, PASSWORD, keygen)
    with open(wallets_path(), "r", encoding="utf-8") as handler:
        raw = handler.read()
    assert ("0" * 63 + "1") not in raw
    assert PASSWORD not in raw
    record = json.loads(raw)[0]
    assert set(record["enc"]) == {"ct", "iv", "salt", "ver"}


def test_create_rejects_weak_or_mismatched_password(keygen):
    """Garantiza que la política se aplique antes de generar claves.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: Las aserciones comprueban el rechazo y que nada se guarde.
    """
    ok, msg, wallet, _ = services.create_wallet("short", "short", keygen)
    assert not ok and wallet is None
    assert "al menos 8" in msg

    ok, msg, _, _ = services.create_wallet(PASSWORD, PASSWORD + "x", keygen)
    assert not ok
    assert "no coinciden" in msg
    assert services.list_wallets() == []


def test_newest_wallet_first(keygen):
    """Verifica que las wallets nuevas se antepongan a las existentes.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: La aserción revisa el orden de la lista.
    """
    _, _, first, _ = services.create_wallet(PASSWORD, PASSWORD, keygen)
    _, _, second, _ = services.create_wallet(PASSWORD, PASSWORD, keygen)
    assert [w.id for w in services.list_wallets()] == [second.id, first.id]


def test_reveal_wrong_password(keygen):
    """Verifica que una contraseña incorrecta no revele nada.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: Las aserciones confirman el mensaje genérico.
    """
    _, _, wallet, _ = services.create_wallet(PASSWORD, PASSWORD, keygen)
    ok, msg, private_key, _ = services.reveal_private_key(wallet.id, "wrong-battery")
    assert not ok
    assert private_key is None
    assert msg == services.REVEAL_FAILED


def test_reveal_unknown_wallet():
    """Comprueba la respuesta ante un identificador inexistente.

    Returns:
        None: Las aserciones revisan el mensaje.
    """
    ok, msg, private_key, _ = services.reveal_private_key("missing", PASSWORD)
    assert not ok and private_key is None
    assert "no encontrada" in msg


def test_delete_requires_password(keygen):
    """Asegura que el borrado sólo ocurra tras verificar la contraseña.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: Las aserciones revisan la lista antes y después del borrado.
    """
    _, _, wallet, _ = services.create_wallet(PASSWORD, PASSWORD, keygen)

    ok, msg, _ = services.delete_wallet(wallet.id, "wrong-battery")
    assert not ok
    assert msg == services.REVEAL_FAILED
    assert len(services.list_wallets()) == 1

    ok, msg, _ = services.delete_wallet(wallet.id, PASSWORD)
    assert ok, msg
    assert services.list_wallets() == []

    ok, msg, _ = services.delete_wallet(wallet.id, PASSWORD)
    assert not ok


def test_unreadable_store_does_not_crash(keygen):
    """Verifica que un archivo de wallets con bytes inválidos no rompa los servicios.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: Las aserciones revisan las respuestas y la recuperación al crear.
    """
    path = wallets_path()
    with open(path, "wb") as handler:
        handler.write(b"\xff\xfe[garbage")

    ok, msg, private_key, _ = services.reveal_private_key("x", PASSWORD)
    assert not ok and private_key is None
    assert msg == services.NOT_FOUND
    ok, msg, _ = services.delete_wallet("x", PASSWORD)
    assert not ok and msg == services.NOT_FOUND

    ok, _, wallet, _ = services.create_wallet(PASSWORD, PASSWORD, keygen)
    assert ok
    assert [w.id for w in services.list_wallets()] == [wallet.id]


def test_create_debug_reports_kdf_iterations(keygen):
    """Asegura que la traza de alta refleje las iteraciones reales de PBKDF2.

    Args:
        keygen (Callable): Generador ficticio de cuentas.

    Returns:
        None: La aserción busca el parámetro en la traza.
    """
    _, _, _, dbg = services.create_wallet(PASSWORD, PASSWORD, keygen)
    assert f"it={PBKDF2_ITERATIONS}" in dbg
