# --------------------------------------------------------------
# File: utils.py
# Description: Utilidades de presentación para direcciones de cuentas.
# --------------------------------------------------------------


def shorten_address(address: str, chars: int = 4) -> str:
    """Abrevia una dirección `0x...` dejando `chars` caracteres a cada lado."""

    if not address or not address.startswith("0x") or len(address) < 2 * chars + 2:
        return address
    return f"{address[:2 + chars]}…{address[-chars:]}"
