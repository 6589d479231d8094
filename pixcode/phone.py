"""Brazilian phone number normalization to E.164 digits.

The rules are a best-effort heuristic, not a lookup against a numbering
registry. Steps that have to invent digits (the default area code, the
mobile ``9`` prefix) are reported as ``NormalizationStatus.AMBIGUOUS`` so
callers can ask the user to confirm the number.
"""

from __future__ import annotations

import re

from pixcode.constants import BR_COUNTRY_CODE, DEFAULT_AREA_CODE, MOBILE_PREFIX
from pixcode.models.normalization import NormalizationStatus, PhoneNormalization

_NON_DIGITS = re.compile(r"[^0-9]")


def digits_only(value: str) -> str:
    return _NON_DIGITS.sub("", value or "")


def normalize_phone_detailed(phone: str, default_area_code: str = DEFAULT_AREA_CODE) -> PhoneNormalization:
    digits = digits_only(phone)
    if not digits:
        return PhoneNormalization(value="", status=NormalizationStatus.NOT_A_PHONE, rule="empty")

    # Trunk prefix, e.g. "011 ..." dialled domestically.
    if digits.startswith("0"):
        digits = digits[1:]
        if not digits:
            return PhoneNormalization(value="", status=NormalizationStatus.NOT_A_PHONE, rule="empty")

    if digits.startswith(BR_COUNTRY_CODE):
        if len(digits) == 11:
            # 55 + area code + 7 digits: subscriber is missing the mobile 9.
            return PhoneNormalization(
                value=digits[:4] + MOBILE_PREFIX + digits[4:],
                status=NormalizationStatus.AMBIGUOUS,
                rule="mobile_prefix",
            )
        return PhoneNormalization(value=digits, status=NormalizationStatus.NORMALIZED, rule="country_code")

    if len(digits) in (10, 11):
        return PhoneNormalization(
            value=BR_COUNTRY_CODE + digits,
            status=NormalizationStatus.NORMALIZED,
            rule="national",
        )

    if 8 <= len(digits) <= 9:
        return PhoneNormalization(
            value=BR_COUNTRY_CODE + default_area_code + digits,
            status=NormalizationStatus.AMBIGUOUS,
            rule="default_area_code",
        )

    return PhoneNormalization(
        value=BR_COUNTRY_CODE + digits,
        status=NormalizationStatus.AMBIGUOUS,
        rule="unrecognized_length",
    )


def normalize_phone(phone: str) -> str:
    """Return ``phone`` as E.164 digits (``5511999999999``), or "" if it has no digits."""
    return normalize_phone_detailed(phone).value


def format_phone_br(phone: str) -> str:
    """Format national digits for display: (11) 99999-9999 or (11) 3333-4444."""
    digits = digits_only(phone)
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return phone

