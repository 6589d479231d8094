from __future__ import annotations

POLYNOMIAL = 0x1021
INITIAL = 0xFFFF


def crc16(payload: str) -> str:
    """Compute CRC16-CCITT-FALSE over the payload, as 4 uppercase hex digits.

    Callers hash everything up to and including the ``6304`` checksum tag.
    """
    crc = INITIAL
    for char in payload:
        crc ^= ord(char) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ POLYNOMIAL
            else:
                crc <<= 1
            crc &= 0xFFFF
    return f"{crc & 0xFFFF:04X}"


def verify_crc(payload: str) -> bool:
    """Check that the last 4 characters are the checksum of everything before them."""
    if len(payload) < 4:
        return False
    body, checksum = payload[:-4], payload[-4:]
    return crc16(body) == checksum.upper()
