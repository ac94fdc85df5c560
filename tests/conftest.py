# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el almacenamiento de wallets.
# --------------------------------------------------------------

import itertools
from typing import Callable, Iterator, Tuple

import pytest


@pytest.fixture(autouse=True)
def _isolate_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla STORAGE_PATH en una carpeta temporal para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    data_dir.mkdir()
    monkeypatch.setenv("STORAGE_PATH", str(data_dir))
    monkeypatch.delenv("WALLETS_FILE", raising=False)
    yield


@pytest.fixture
def keygen() -> Callable[[], Tuple[str, str]]:
    """Generador determinista de pares (clave privada, dirección) para pruebas.

    Returns:
        Callable[[], Tuple[str, str]]: Productor de cuentas ficticias.
    """
    counter = itertools.count(1)

    def _generate() -> Tuple[str, str]:
        n = next(counter)
        return f"0x{n:064x}", f"0x{n:040x}"

    return _generate
