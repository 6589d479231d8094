from pixcode.crc import crc16, verify_crc
from pixcode.errors import ValidationError
from pixcode.keys import classify_key, normalize_key, validate_key
from pixcode.models.pix import MerchantProfile, PaymentRequest, PixKey, PixKeyType
from pixcode.payload import build, build_with_report, generate_pix_payload
from pixcode.phone import normalize_phone, normalize_phone_detailed
from pixcode.text import sanitize

__all__ = [
    "MerchantProfile",
    "PaymentRequest",
    "PixKey",
    "PixKeyType",
    "ValidationError",
    "build",
    "build_with_report",
    "classify_key",
    "crc16",
    "generate_pix_payload",
    "normalize_key",
    "normalize_phone",
    "normalize_phone_detailed",
    "sanitize",
    "validate_key",
    "verify_crc",
]
