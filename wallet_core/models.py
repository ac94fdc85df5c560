# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del sobre cifrado y de las wallets guardadas.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan los registros persistidos por la aplicación."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PAYLOAD_VERSION = 1


class EncryptedPayload(BaseModel):
    """Sobre autocontenido con la clave privada cifrada.

    Attributes:
        ciphertext (str): Salida AES-GCM (con tag de 16 bytes al final) en Base64.
        iv (str): Nonce de 96 bits en Base64.
        salt (str): Salt de 16 bytes para PBKDF2 en Base64.
        version (int): Versión del formato; reservada para migraciones.

    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    ciphertext: str = Field(alias="ct")
    iv: str
    salt: str
    version: int = Field(default=PAYLOAD_VERSION, alias="ver")

    def to_json_dict(self) -> Dict[str, Any]:
        """Devuelve la forma JSON con exactamente `ct`, `iv`, `salt` y `ver`."""

        return self.model_dump(by_alias=True)

    @classmethod
    def from_json_dict(cls, data: Dict[str, Any]) -> "EncryptedPayload":
        """Reconstruye el sobre a partir de su forma JSON."""

        return cls.model_validate(data)


class StoredWallet(BaseModel):
    """Registro de wallet tal y como se guarda en disco.

    Attributes:
        id (str): Identificador único del registro.
        address (str): Dirección pública de la cuenta (`0x...`).
        enc (EncryptedPayload): Clave privada cifrada con la contraseña.
        created_at (str): Marca temporal ISO-8601 de creación.
        label (Optional[str]): Etiqueta opcional elegida por el usuario.

    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    address: str
    enc: EncryptedPayload
    created_at: str = Field(alias="createdAt")
    label: Optional[str] = None

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        if not value.startswith("0x"):
            raise ValueError("address must start with 0x")
        return value

    def to_json_dict(self) -> Dict[str, Any]:
        """Serializa el registro con las claves usadas en el archivo JSON."""

        return self.model_dump(by_alias=True, exclude_none=True)
