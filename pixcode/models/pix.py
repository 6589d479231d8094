from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, StringConstraints

from pixcode.constants import (
    DEFAULT_MERCHANT_CITY,
    DEFAULT_MERCHANT_NAME,
    DEFAULT_TRANSACTION_ID,
    FIELD_VALUE_MAX,
    MERCHANT_CITY_MAX,
    MERCHANT_NAME_MAX,
)


class PixKeyType(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"
    EMAIL = "email"
    PHONE = "phone"
    RANDOM = "random"

    @classmethod
    def parse(cls, text: str | None) -> PixKeyType | None:
        """Map a free-text key type tag to a member; unknown tags give None."""
        if not text:
            return None
        tag = text.strip().lower()
        tag = _KEY_TYPE_ALIASES.get(tag, tag)
        try:
            return cls(tag)
        except ValueError:
            return None


_KEY_TYPE_ALIASES = {
    "celular": "phone",
    "telefone": "phone",
    "tel": "phone",
    "evp": "random",
    "aleatoria": "random",
    "aleatória": "random",
    "chave aleatoria": "random",
    "chave aleatória": "random",
}


class PixKey(BaseModel):
    declared_type: PixKeyType | None = None
    raw_value: str


class MerchantProfile(BaseModel):
    name: str = ""
    city: str = ""

    def sanitized(self) -> MerchantProfile:
        from pixcode.text import sanitize_or_default

        return MerchantProfile(
            name=sanitize_or_default(self.name, MERCHANT_NAME_MAX, DEFAULT_MERCHANT_NAME),
            city=sanitize_or_default(self.city, MERCHANT_CITY_MAX, DEFAULT_MERCHANT_CITY),
        )


class PaymentRequest(BaseModel):
    key: PixKey
    merchant: MerchantProfile = MerchantProfile()
    amount: Decimal = Decimal("0")
    transaction_id: str = DEFAULT_TRANSACTION_ID


class Field(BaseModel):
    id: Annotated[str, StringConstraints(pattern=r"^[0-9]{2}$")]
    value: Annotated[str, StringConstraints(max_length=FIELD_VALUE_MAX)]

    def encode(self) -> str:
        from pixcode.tlv import field

        return field(self.id, self.value)
