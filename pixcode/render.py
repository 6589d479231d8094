"""PNG rendering of BR Code payloads through the ``qrcode`` library."""

from __future__ import annotations

from io import BytesIO

import qrcode
from qrcode.image.pil import PilImage

from pixcode.errors import ValidationError
from pixcode.models.pix import PaymentRequest
from pixcode.payload import build


def render_qrcode_png(payload: str, *, box_size: int = 10, border: int = 2) -> bytes:
    """Render an already-built payload string as PNG bytes."""
    if not payload:
        raise ValidationError("payload required", code="empty_payload")

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img: PilImage = qr.make_image(fill_color="black", back_color="white")

    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def generate_pix_qrcode_png(
    request: PaymentRequest,
    *,
    box_size: int | None = None,
    border: int | None = None,
) -> bytes:
    """Build the payload for ``request`` and render it as PNG bytes.

    Sizes default to ``PIXCODE_QR_BOX_SIZE`` / ``PIXCODE_QR_BORDER``.
    """
    from pixcode.settings import settings

    return render_qrcode_png(
        build(request),
        box_size=settings.qr_box_size if box_size is None else box_size,
        border=settings.qr_border if border is None else border,
    )
