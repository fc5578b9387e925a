import logging
from cryptography.hazmat.primitives import constant_time
from otp_tools.hotp import hotp_code
from otp_tools.totp import resolve_time_slice


logger = logging.getLogger(__name__)

MAX_COUNTER = 2**64 - 1


def verification_window(counter: int, discrepancy: int) -> range:
    """
    Returns the time slices accepted around 'counter', both ends included.
    The window is clamped to the range of unsigned 64 bits counters instead of wrapping around.
    A counter outside of that range is an error, not a mismatch.
    """
    if not 0 <= counter <= MAX_COUNTER:
        raise OverflowError(f"Time slice {counter} does not fit in an unsigned 64 bits integer")
    if discrepancy < 0:
        raise ValueError(f"Expected a positive discrepancy, got {discrepancy}")
    start = max(0, counter - discrepancy)
    end = min(MAX_COUNTER, counter + discrepancy)
    return range(start, end + 1)


def verify_totp_code(key: bytes, digits: int, candidate: str, discrepancy: int = 0,
                     time_slice: int | None = None, step_seconds: int = 30) -> bool:
    """
    Returns whether the candidate code matches the code of any time slice
    within 'discrepancy' steps of the given time slice (now by default).
    A candidate of the wrong length is refused without computing any HMAC.
    """
    if len(candidate) != digits:
        logger.debug("refused a code of %d characters, expected %d", len(candidate), digits)
        return False
    counter = resolve_time_slice(time_slice, step_seconds)
    for c in verification_window(counter, discrepancy):
        if constant_time.bytes_eq(hotp_code(key, c, digits).encode(), candidate.encode()):
            logger.debug("code matched at offset %d", c - counter)
            return True
    logger.debug("code did not match within %d steps", discrepancy)
    return False
