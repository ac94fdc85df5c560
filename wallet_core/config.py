# --------------------------------------------------------------
# File: config.py
# Description: Configuración de rutas de persistencia leída del entorno.
# --------------------------------------------------------------

import os

from dotenv import load_dotenv

load_dotenv()


def storage_dir() -> str:
    """Directorio donde se guarda la lista de wallets."""

    return os.getenv("STORAGE_PATH", "./_data")


def wallets_path() -> str:
    """Ruta completa del archivo JSON de wallets."""

    return os.path.join(storage_dir(), os.getenv("WALLETS_FILE", "wallets.json"))
