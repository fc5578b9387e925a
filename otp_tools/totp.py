from datetime import datetime, UTC
from otp_tools.hotp import hotp_code


def counter_for_time(unix_seconds: int, step_seconds: int = 30) -> int:
    """
    Returns the TOTP time slice containing the given unix timestamp.
    Time-Based One-Time Password Algorithm is an open standard: https://www.rfc-editor.org/rfc/rfc6238
    """
    return int(unix_seconds) // step_seconds


def current_time_slice(step_seconds: int = 30) -> int:
    """
    Returns the TOTP time slice of the current UTC time
    """
    return counter_for_time(datetime.now(tz=UTC).timestamp(), step_seconds)


def resolve_time_slice(time_slice: int | None = None, step_seconds: int = 30) -> int:
    """
    Returns the given time slice, or the current one if it is None or 0.
    The given value is a unix timestamp already divided by the step, not a number of seconds.
    """
    if not time_slice:
        return current_time_slice(step_seconds)
    return time_slice


def totp_code(key: bytes, digits: int = 6, time_slice: int | None = None, step_seconds: int = 30) -> str:
    """
    Returns the TOTP code for the given key at the given time slice (now by default)
    """
    return hotp_code(key, resolve_time_slice(time_slice, step_seconds), digits)
