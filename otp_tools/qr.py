import math
import logging
from io import BytesIO
from decimal import Decimal
from typing import Protocol
import qrcode
import qrcode.constants
import qrcode.image.svg
from qrcode.exceptions import DataOverflowError
from otp_tools.errors import RenderingError
from otp_tools.provisioning import ErrorCorrectionLevel, DEFAULT_QR_SIZE


logger = logging.getLogger(__name__)

_QRCODE_LEVELS = {
    ErrorCorrectionLevel.LOW: qrcode.constants.ERROR_CORRECT_L,
    ErrorCorrectionLevel.MEDIUM: qrcode.constants.ERROR_CORRECT_M,
    ErrorCorrectionLevel.QUARTILE: qrcode.constants.ERROR_CORRECT_Q,
    ErrorCorrectionLevel.HIGH: qrcode.constants.ERROR_CORRECT_H,
}


class _PixelSvgPathImage(qrcode.image.svg.SvgPathImage):
    """
    SVG path image measured in pixels (one unit of box_size is one pixel) instead of tenths of millimeters
    """

    def units(self, pixels: int | Decimal, text: bool = True) -> Decimal | str:
        units = Decimal(pixels)
        if not text:
            return units
        return f"{units}px"


class QrRenderer(Protocol):
    """
    Anything able to turn a provisioning URI into an image
    """

    def render(self, uri: str, width: int, height: int, level: ErrorCorrectionLevel) -> bytes:
        ...


class SvgQrRenderer:
    """
    Renders QR codes as SVG documents, black on white.

    Example
    -------
    >>> svg = SvgQrRenderer().render(uri, 200, 200, ErrorCorrectionLevel.MEDIUM)
    """

    def __init__(self, border: int = 4):
        self.border = border

    def render(self, uri: str, width: int = DEFAULT_QR_SIZE, height: int = DEFAULT_QR_SIZE,
               level: ErrorCorrectionLevel = ErrorCorrectionLevel.MEDIUM) -> bytes:
        """
        Returns the UTF-8 SVG image of the QR code, at least 'width' x 'height' pixels.
        A width or height of 0 falls back to the default size of 200px.
        """
        width = width or DEFAULT_QR_SIZE
        height = height or DEFAULT_QR_SIZE
        qr = qrcode.QRCode(error_correction=_QRCODE_LEVELS[ErrorCorrectionLevel(level)], border=self.border)
        qr.add_data(uri)
        try:
            qr.make(fit=True)
        except DataOverflowError as e:
            raise RenderingError(f"The URI is too long to fit in a QR code ({len(uri)} characters)") from e
        # smallest box size reaching the requested minimum dimensions
        n_boxes = qr.modules_count + 2 * self.border
        qr.box_size = max(1, math.ceil(max(width, height) / n_boxes))
        logger.debug("rendering a QR code of version %d with boxes of %d px", qr.version, qr.box_size)
        image = qr.make_image(image_factory=_PixelSvgPathImage)
        buffer = BytesIO()
        image.save(buffer)
        return buffer.getvalue()
