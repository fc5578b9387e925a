class AuthenticatorException(Exception):
    """
    Base class of all the errors raised by otp_tools
    """
    pass


class InvalidSecretLength(AuthenticatorException, ValueError):
    """
    The base32 text of a secret is shorter or longer than allowed
    """
    pass


class InvalidSecretEncoding(AuthenticatorException, ValueError):
    """
    The secret is not valid padded base32 (RFC 4648)
    """
    pass


class RenderingError(AuthenticatorException):
    """
    A QR code could not be rendered from the provisioning URI
    """
    pass
