"""PIX key classification.

Phone keys are registered in E.164 form with a leading ``+``. Everything
else (CPF, CNPJ, e-mail, random EVP keys) is embedded as typed, trimmed.
"""

from __future__ import annotations

import logging
import re

from pixcode.models.normalization import KeyNormalization, NormalizationStatus
from pixcode.models.pix import PixKeyType
from pixcode.phone import digits_only, normalize_phone_detailed

logger = logging.getLogger(__name__)

_PHONE_CHARS = re.compile(r"[0-9()+\- ]+")
_FORMATTING_CHARS = frozenset("()- ")

_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_UUID = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)


def looks_like_phone(value: str) -> bool:
    value = value.strip()
    if not _PHONE_CHARS.fullmatch(value):
        return False
    if value.startswith("+") or any(c in _FORMATTING_CHARS for c in value):
        return True
    return 10 <= len(digits_only(value)) <= 14


def _as_phone(trimmed: str, declared_type: PixKeyType | None) -> KeyNormalization | None:
    result = normalize_phone_detailed(trimmed.removeprefix("+"))
    if not result.value:
        return None
    return KeyNormalization(value="+" + result.value, status=result.status, declared_type=declared_type)


def classify_key(raw: str, declared_type: PixKeyType | None = None) -> KeyNormalization:
    """Decide whether ``raw`` is a phone key and normalize it if so.

    The phone heuristic always runs; the declared type is only a hint. A
    declared ``phone`` forces normalization even when the heuristic says no.
    A phone-looking key declared as something else is still normalized and
    reported through ``KeyNormalization.type_conflict`` (an 11-digit CPF is
    the usual case).
    """
    trimmed = (raw or "").strip()
    passthrough = KeyNormalization(
        value=trimmed,
        status=NormalizationStatus.NOT_A_PHONE,
        declared_type=declared_type,
    )

    if declared_type == PixKeyType.PHONE or looks_like_phone(trimmed):
        normalized = _as_phone(trimmed, declared_type)
        if normalized is not None:
            return normalized
        logger.debug("Phone-like key yielded no digits, using it verbatim")

    return passthrough


def normalize_key(raw: str) -> str:
    return classify_key(raw).value


def validate_key(value: str, key_type: PixKeyType) -> bool:
    """Check that ``value`` is plausible for ``key_type``. Advisory only."""
    value = (value or "").strip()
    if not value:
        return False

    if key_type == PixKeyType.CPF:
        return re.fullmatch(r"[0-9]{11}", re.sub(r"[.\-]", "", value)) is not None
    if key_type == PixKeyType.CNPJ:
        return re.fullmatch(r"[0-9]{14}", re.sub(r"[./\-]", "", value)) is not None
    if key_type == PixKeyType.EMAIL:
        return _EMAIL.fullmatch(value) is not None
    if key_type == PixKeyType.PHONE:
        if not _PHONE_CHARS.fullmatch(value):
            return False
        normalized = normalize_phone_detailed(value.removeprefix("+"))
        return normalized.status == NormalizationStatus.NORMALIZED and len(normalized.value) in (12, 13)
    if key_type == PixKeyType.RANDOM:
        return _UUID.fullmatch(value) is not None
    return False
