"""EMV MPM Tag-Length-Value encoding.

Every field is ``id`` (2 digits) + ``len(value)`` (2 digits, zero padded)
+ ``value``. Composite fields wrap already-encoded sub-fields, so their
length prefix counts the encoded characters of the children.
"""

from __future__ import annotations

import re

from pixcode.constants import FIELD_VALUE_MAX
from pixcode.errors import ValidationError
from pixcode.models.pix import Field

_FIELD_ID = re.compile(r"[0-9]{2}")


def field(tag: str, value: str) -> str:
    if not _FIELD_ID.fullmatch(tag):
        raise ValidationError(f"invalid field id: {tag!r}", code="invalid_field_id")
    if len(value) > FIELD_VALUE_MAX:
        raise ValidationError(
            f"field {tag} value is {len(value)} characters, max is {FIELD_VALUE_MAX}",
            code="field_too_long",
        )
    return f"{tag}{len(value):02d}{value}"


def composite(tag: str, *encoded: str) -> str:
    """Wrap already-encoded sub-fields in an outer field."""
    return field(tag, "".join(encoded))


def parse_fields(data: str) -> list[Field]:
    """Split a TLV string into its top-level fields.

    Nested templates (26, 62) come back as a single field; call again on
    their value to read the sub-fields.
    """
    fields: list[Field] = []
    index = 0
    while index < len(data):
        header = data[index : index + 4]
        if len(header) < 4:
            raise ValidationError(f"truncated field header at position {index}", code="malformed_tlv")
        tag, length_str = header[:2], header[2:]
        if not _FIELD_ID.fullmatch(tag) or not _FIELD_ID.fullmatch(length_str):
            raise ValidationError(f"invalid field header {header!r} at position {index}", code="malformed_tlv")
        length = int(length_str)
        start = index + 4
        value = data[start : start + length]
        if len(value) != length:
            raise ValidationError(
                f"field {tag} declares {length} characters but only {len(value)} remain",
                code="malformed_tlv",
            )
        fields.append(Field(id=tag, value=value))
        index = start + length
    return fields
