from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from pixcode.models.pix import PixKeyType


class NormalizationStatus(str, Enum):
    NORMALIZED = "normalized"
    AMBIGUOUS = "ambiguous"
    NOT_A_PHONE = "not_a_phone"


class PhoneNormalization(BaseModel):
    value: str  # digits only, no '+'
    status: NormalizationStatus
    rule: str


class KeyNormalization(BaseModel):
    value: str  # phones carry a leading '+'
    status: NormalizationStatus
    declared_type: PixKeyType | None = None

    @property
    def is_phone(self) -> bool:
        return self.status != NormalizationStatus.NOT_A_PHONE

    @property
    def protocol_value(self) -> str:
        """Key as embedded in sub-field 01 of field 26 (never starts with '+')."""
        return self.value.removeprefix("+")

    @property
    def type_conflict(self) -> bool:
        """True when the key was read as a phone but declared as another type."""
        return self.is_phone and self.declared_type not in (None, PixKeyType.PHONE)
