# --------------------------------------------------------------
# File: storage.py
# Description: Persistencia de la lista de wallets en un archivo JSON.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para el almacenamiento local."""

from __future__ import annotations

import json
import logging
import os
from typing import List

from pydantic import ValidationError

from wallet_core.models import StoredWallet

__all__ = ["load_wallets", "save_wallets"]

logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def load_wallets(path: str) -> List[StoredWallet]:
    """Carga las wallets guardadas descartando registros inválidos.

    Args:
        path (str): Ruta del archivo JSON de wallets.

    Returns:
        List[StoredWallet]: Wallets válidas en el orden guardado; lista vacía si
        el archivo no existe, está corrupto o no contiene una lista.

    """

    try:
        with open(path, "r", encoding="utf-8") as handler:
            raw = json.load(handler)
    except FileNotFoundError:
        return []
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Archivo de wallets corrupto en %s; se ignora", path)
        return []

    if not isinstance(raw, list):
        return []

    wallets: List[StoredWallet] = []
    for entry in raw:
        try:
            wallets.append(StoredWallet.model_validate(entry))
        except ValidationError:
            logger.warning("Registro de wallet inválido descartado")
    return wallets


def save_wallets(wallets: List[StoredWallet], path: str) -> None:
    """Guarda la lista de wallets aplicando escritura atómica."""

    _ensure_parent_dir(path)
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as handler:
        json.dump([w.to_json_dict() for w in wallets], handler, indent=2, ensure_ascii=False)
    os.replace(tmp_path, path)
