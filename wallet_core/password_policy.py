# --------------------------------------------------------------
# File: password_policy.py
# Description: Reglas mínimas para la contraseña que protege una wallet.
# --------------------------------------------------------------
"""Validación de contraseñas aplicada por la capa de servicios.

El códec de sobres acepta cualquier contraseña; esta política vive fuera de él
para que cada interfaz pueda imponer la suya.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

MIN_LENGTH = 8


def check_wallet_password(password: str, confirm: Optional[str] = None) -> Tuple[bool, List[str]]:
    """Evalúa la contraseña propuesta para una nueva wallet.

    Args:
        password (str): Contraseña introducida.
        confirm (Optional[str]): Repetición de la contraseña; se ignora si es None.

    Returns:
        Tuple[bool, List[str]]: Cumplimiento y motivos de rechazo.

    """

    reasons: List[str] = []
    if len(password) < MIN_LENGTH:
        reasons.append(f"La contraseña debe tener al menos {MIN_LENGTH} caracteres.")
    if confirm is not None and password != confirm:
        reasons.append("Las contraseñas no coinciden.")
    return not reasons, reasons
