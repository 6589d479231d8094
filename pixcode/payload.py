"""PIX BR Code payload generator following BCB EMV QR Code specification.

Builds the payload string for a static (merchant-presented) PIX QR code.
Rendering the string as an image is left to ``pixcode.render``.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pydantic

from pixcode.constants import (
    COUNTRY_BR,
    CRC_PREFIX,
    CURRENCY_BRL,
    DEFAULT_TRANSACTION_ID,
    FIELD_VALUE_MAX,
    ID_ADDITIONAL_DATA,
    ID_AMOUNT,
    ID_COUNTRY,
    ID_CURRENCY,
    ID_GUI,
    ID_MERCHANT_ACCOUNT,
    ID_MERCHANT_CATEGORY,
    ID_MERCHANT_CITY,
    ID_MERCHANT_NAME,
    ID_PAYLOAD_FORMAT,
    ID_PIX_KEY,
    ID_POINT_OF_INITIATION,
    ID_REFERENCE_LABEL,
    MERCHANT_CATEGORY,
    PAYLOAD_FORMAT,
    PIX_GUI,
    STATIC_INITIATION,
    TRANSACTION_ID_MAX,
)
from pixcode.crc import crc16
from pixcode.errors import ValidationError
from pixcode.keys import classify_key
from pixcode.models import format_amount
from pixcode.models.normalization import NormalizationStatus
from pixcode.models.payload import PixPayload
from pixcode.models.pix import MerchantProfile, PaymentRequest, PixKey, PixKeyType
from pixcode.tlv import composite, field

logger = logging.getLogger(__name__)


def _mask(value: str) -> str:
    return value[:4] + "***" if len(value) > 4 else "***"


def _check_amount(amount: Decimal) -> None:
    if not amount.is_finite():
        raise ValidationError("amount must be a finite number", code="invalid_amount")
    if amount < 0:
        raise ValidationError("amount must be non-negative", code="negative_amount")
    if amount.adjusted() >= FIELD_VALUE_MAX:
        raise ValidationError("amount is too large for the amount field", code="field_too_long")


def build_with_report(request: PaymentRequest) -> PixPayload:
    """Build the payload and report how the key was interpreted.

    Raises:
        ValidationError: empty key, negative amount, over-long transaction id,
            or a field value that does not fit the 2-digit length prefix.
    """
    if not request.key.raw_value.strip():
        raise ValidationError("PIX key required", code="empty_key")
    _check_amount(request.amount)

    key = classify_key(request.key.raw_value, request.key.declared_type)
    if not key.protocol_value:
        raise ValidationError("PIX key required", code="empty_key")

    txid = request.transaction_id or DEFAULT_TRANSACTION_ID
    if len(txid) > TRANSACTION_ID_MAX:
        raise ValidationError(
            f"transaction id must be at most {TRANSACTION_ID_MAX} characters",
            code="transaction_id_too_long",
        )

    merchant = request.merchant.sanitized()
    amount = format_amount(request.amount)

    # Merchant Account Information (tag 26)
    mai = composite(ID_MERCHANT_ACCOUNT, field(ID_GUI, PIX_GUI), field(ID_PIX_KEY, key.protocol_value))

    payload = (
        field(ID_PAYLOAD_FORMAT, PAYLOAD_FORMAT)
        + field(ID_POINT_OF_INITIATION, STATIC_INITIATION)
        + mai
        + field(ID_MERCHANT_CATEGORY, MERCHANT_CATEGORY)
        + field(ID_CURRENCY, CURRENCY_BRL)
        + field(ID_AMOUNT, amount)
        + field(ID_COUNTRY, COUNTRY_BR)
        + field(ID_MERCHANT_NAME, merchant.name)
        + field(ID_MERCHANT_CITY, merchant.city)
        + composite(ID_ADDITIONAL_DATA, field(ID_REFERENCE_LABEL, txid))
    )

    # The checksum covers its own "6304" header.
    payload += CRC_PREFIX
    payload += crc16(payload)

    if key.status == NormalizationStatus.AMBIGUOUS:
        logger.warning("PIX phone key %s was normalized by guessing; confirm it with the merchant", _mask(key.value))
    if key.type_conflict:
        logger.warning(
            "PIX key %s declared as %s looks like a phone number and was normalized",
            _mask(key.value),
            key.declared_type.value,
        )
    logger.debug("PIX payload built: key=%s status=%s amount=%s", _mask(key.value), key.status.value, amount)

    return PixPayload(payload=payload, key=key, merchant=merchant, amount=amount)


def build(request: PaymentRequest) -> str:
    return build_with_report(request).payload


def generate_pix_payload(
    *,
    pix_key: str,
    merchant_name: str,
    merchant_city: str = "",
    amount: Decimal | float | int | str = 0,
    txid: str = DEFAULT_TRANSACTION_ID,
    key_type: PixKeyType | str | None = None,
) -> str:
    """Generate a PIX BR Code payload string.

    Args:
        pix_key: The PIX key (CPF, CNPJ, phone, email, or random key).
        merchant_name: Recipient name, sanitized to 25 ASCII chars.
        merchant_city: Recipient city, sanitized to 15 ASCII chars. Defaults to SAO PAULO.
        amount: Transaction amount in reais (e.g. 150.50). Always emitted, "0.00" included.
        txid: Transaction ID (default "***").
        key_type: Declared key type, or None to detect phone keys heuristically.

    Returns:
        The complete BR Code payload string with CRC16.

    Raises:
        ValidationError: any invalid input, including amounts that are not numbers.
    """
    if isinstance(key_type, str) and not isinstance(key_type, PixKeyType):
        key_type = PixKeyType.parse(key_type)
    try:
        request = PaymentRequest(
            key=PixKey(declared_type=key_type, raw_value=pix_key),
            merchant=MerchantProfile(name=merchant_name, city=merchant_city),
            amount=amount,
            transaction_id=txid,
        )
    except pydantic.ValidationError as e:
        if any(err["loc"][:1] == ("amount",) for err in e.errors()):
            raise ValidationError(f"invalid amount: {amount!r}", code="invalid_amount") from e
        raise ValidationError(f"invalid payment request: {e.error_count()} error(s)", code="invalid_request") from e
    return build(request)
