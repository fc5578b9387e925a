__version__ = "0.1.0"

from otp_tools.errors import AuthenticatorException, InvalidSecretLength, InvalidSecretEncoding, RenderingError
from otp_tools.config import AuthenticatorConfig, DEFAULT_CONFIG
from otp_tools.provisioning import ErrorCorrectionLevel
from otp_tools.authenticator import Authenticator, create_secret, get_code, verify_code, provisioning_uri
