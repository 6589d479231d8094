from __future__ import annotations

from pydantic import BaseModel

from pixcode.models.normalization import KeyNormalization, NormalizationStatus
from pixcode.models.pix import MerchantProfile


class PixPayload(BaseModel):
    payload: str
    key: KeyNormalization
    merchant: MerchantProfile  # as sanitized into fields 59/60
    amount: str  # as serialized into field 54

    @property
    def ambiguous(self) -> bool:
        return self.key.status == NormalizationStatus.AMBIGUOUS
