from otp_tools.base32 import random_base32_string


def create_secret(length: int = 32) -> str:
    """
    generates a random base32 secret to share with an authenticator app.
    The secret is not padded, so lengths that are multiple of 8 (like the default 32) are the ones that can be decoded back.
    """
    return random_base32_string(length)
