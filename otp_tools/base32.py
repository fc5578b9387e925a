import os
import re
import base64
import logging
import binascii
from otp_tools.errors import InvalidSecretLength, InvalidSecretEncoding


logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
SECRET_MIN_LEN = 16
SECRET_MAX_LEN = 128
_BASE32_PATTERN = re.compile(r"[A-Z2-7]*=*")  # padding is only allowed at the end


def decode_secret(text: str) -> bytes:
    """
    Decode a base32 secret (RFC 4648, uppercase, padded) into the raw key bytes.
    The secret is rejected before any decoding if its length is not in [16, 128] characters.
    There is no lenient decoding: lowercase letters, whitespace or missing padding are errors.
    """
    if not SECRET_MIN_LEN <= len(text) <= SECRET_MAX_LEN:
        logger.debug("rejected a secret of %d characters", len(text))
        raise InvalidSecretLength(f"Bad secret length {len(text)}, must be between {SECRET_MIN_LEN} and {SECRET_MAX_LEN} characters (32 recommended)")
    if _BASE32_PATTERN.fullmatch(text) is None:
        logger.debug("rejected a secret with non base32 characters")
        raise InvalidSecretEncoding("Secret contains characters outside of the base32 alphabet, or misplaced padding")
    try:
        return base64.b32decode(text)
    except binascii.Error as e:
        logger.debug("rejected a secret with malformed padding")
        raise InvalidSecretEncoding(f"Secret must be base32 decodeable ({e})") from e


def random_base32_string(length: int) -> str:
    """
    Returns 'length' symbols drawn uniformly from the base32 alphabet (padding excluded).
    Each random byte is reduced to its 5 low bits, which keeps the draw uniform since 256 is a multiple of 32.
    """
    if length < 0:
        raise ValueError(f"Expected a positive length, got {length}")
    return "".join(ALPHABET[byte & 0x1F] for byte in os.urandom(length))
