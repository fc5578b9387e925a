from enum import Enum
from urllib.parse import quote


DEFAULT_QR_SIZE = 200


class ErrorCorrectionLevel(str, Enum):
    """
    Fraction of a QR code that can be damaged while staying readable
    """
    LOW = "L"  # 7%
    MEDIUM = "M"  # 15%
    QUARTILE = "Q"  # 25%
    HIGH = "H"  # 30%


def _encode(component: str) -> str:
    """
    Percent-encode everything except the RFC 3986 unreserved characters
    """
    return quote(component, safe="")


def provisioning_uri(secret: str, label: str, issuer: str) -> str:
    """
    URI to display as a QR code for MFA applications
    Key Uri Format: https://github.com/google/google-authenticator/wiki/Key-Uri-Format
    """
    return f"otpauth://totp/{_encode(label)}?secret={_encode(secret)}&issuer={_encode(issuer)}"


def qr_code_url(uri: str, width: int = DEFAULT_QR_SIZE, height: int = DEFAULT_QR_SIZE,
                level: ErrorCorrectionLevel = ErrorCorrectionLevel.MEDIUM) -> str:
    """
    URL of a Google Charts image of the QR code for the given provisioning URI.
    A width or height of 0 falls back to the default size of 200px.
    """
    width = width or DEFAULT_QR_SIZE
    height = height or DEFAULT_QR_SIZE
    level = ErrorCorrectionLevel(level)
    return f"https://chart.googleapis.com/chart?chs={width}x{height}&chld={level.value}|0&cht=qr&chl={_encode(uri)}"
