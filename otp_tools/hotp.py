from cryptography.hazmat.primitives import hashes, hmac


def counter_to_bytes(counter: int) -> bytes:
    """
    Pack the counter into 8 bytes, most significant byte first, whatever the host byte order
    """
    return counter.to_bytes(8, "big")


def bytes_to_uint32(chunk: bytes) -> int:
    """
    Read 4 bytes as an unsigned integer, most significant byte first
    """
    assert len(chunk) == 4
    return int.from_bytes(chunk, "big")


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    Returns the 20 bytes HMAC-SHA1 digest of the message
    """
    h = hmac.HMAC(key, hashes.SHA1())
    h.update(message)
    return h.finalize()


def dynamic_truncate(digest: bytes) -> int:
    """
    Dynamic truncation of an HMAC-SHA1 digest into a positive 31 bits integer.
    HMAC-Based One-Time Password Algorithm is an open standard: https://www.rfc-editor.org/rfc/rfc4226#section-5.3
    """
    offset = digest[19] & 0x0F  # offset between 0 and 15
    return bytes_to_uint32(digest[offset:offset + 4]) & 0x7FFFFFFF


def hotp_code(key: bytes, counter: int, digits: int = 6) -> str:
    """
    Returns the zero-padded HOTP code of the given key for the given counter.
    The counter must fit in an unsigned 64 bits integer.
    """
    binary = dynamic_truncate(hmac_sha1(key, counter_to_bytes(counter)))
    return str(binary % (10 ** digits)).zfill(digits)
