# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios que orquesta el alta y revelado de wallets.
# --------------------------------------------------------------
"""Inicializa el paquete `wallet_api`."""

__all__ = ["services"]
