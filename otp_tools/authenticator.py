from otp_tools.base32 import decode_secret
from otp_tools.config import AuthenticatorConfig, DEFAULT_CONFIG
from otp_tools.secret import create_secret as _create_secret
from otp_tools.totp import totp_code
from otp_tools.verifier import verify_totp_code
from otp_tools.provisioning import ErrorCorrectionLevel, DEFAULT_QR_SIZE, provisioning_uri as _provisioning_uri, qr_code_url as _qr_code_url
from otp_tools.qr import QrRenderer, SvgQrRenderer


class Authenticator:
    """
    Generates and verifies codes compatible with authenticator apps such as Google Authenticator.
    It holds nothing but its immutable config, so one instance can be shared between threads.

    Example
    -------
    >>> auth = Authenticator(AuthenticatorConfig(digits=6))
    >>> secret = auth.create_secret()
    >>> code = auth.get_code(secret)
    >>> auth.verify_code(secret, code, discrepancy=1)
    True
    """

    def __repr__(self):
        return f"{type(self).__name__}(digits={self.config.digits}, step_seconds={self.config.step_seconds})"

    def __init__(self, config: AuthenticatorConfig = DEFAULT_CONFIG):
        self.config = config

    def with_code_length(self, digits: int) -> "Authenticator":
        return Authenticator(self.config.with_code_length(digits))

    def create_secret(self, length: int = 32) -> str:
        return _create_secret(length)

    def get_code(self, secret: str, time_slice: int | None = None) -> str:
        """
        Returns the code of the secret for the given time slice (unix time divided by the step).
        If the time slice is None or 0, the current time is used.
        Raises InvalidSecretLength or InvalidSecretEncoding if the secret is malformed.
        """
        return totp_code(decode_secret(secret), self.config.digits, time_slice, self.config.step_seconds)

    def verify_code(self, secret: str, code: str, discrepancy: int = 0, time_slice: int | None = None) -> bool:
        """
        Returns whether the code is valid for the secret, up to 'discrepancy' time steps before or after the given time slice.
        A malformed secret raises an error, it is not reported as a mismatching code.
        """
        key = decode_secret(secret)
        return verify_totp_code(key, self.config.digits, code, discrepancy, time_slice, self.config.step_seconds)

    def provisioning_uri(self, secret: str, label: str, issuer: str) -> str:
        return _provisioning_uri(secret, label, issuer)

    def qr_code_url(self, secret: str, label: str, issuer: str, width: int = DEFAULT_QR_SIZE, height: int = DEFAULT_QR_SIZE,
                    level: ErrorCorrectionLevel = ErrorCorrectionLevel.MEDIUM) -> str:
        """
        Returns the URL of a Google Charts QR code image for the secret
        """
        return _qr_code_url(self.provisioning_uri(secret, label, issuer), width, height, level)

    def qr_code(self, secret: str, label: str, issuer: str, width: int = DEFAULT_QR_SIZE, height: int = DEFAULT_QR_SIZE,
                level: ErrorCorrectionLevel = ErrorCorrectionLevel.MEDIUM, renderer: QrRenderer | None = None) -> bytes:
        """
        Returns a QR code image of the provisioning URI, rendered as SVG unless another renderer is given.
        Errors of the renderer are passed through.
        """
        if renderer is None:
            renderer = SvgQrRenderer()
        return renderer.render(self.provisioning_uri(secret, label, issuer), width, height, level)


def create_secret(length: int = 32) -> str:
    return _create_secret(length)


def get_code(secret: str, time_slice: int | None = None, config: AuthenticatorConfig = DEFAULT_CONFIG) -> str:
    return Authenticator(config).get_code(secret, time_slice)


def verify_code(secret: str, code: str, discrepancy: int = 0, time_slice: int | None = None,
                config: AuthenticatorConfig = DEFAULT_CONFIG) -> bool:
    return Authenticator(config).verify_code(secret, code, discrepancy, time_slice)


def provisioning_uri(secret: str, label: str, issuer: str) -> str:
    return _provisioning_uri(secret, label, issuer)
