from pydantic import BaseModel, ConfigDict, Field


class AuthenticatorConfig(BaseModel):
    """
    Immutable settings shared by every code generation and verification.
    A single instance can be created once and passed around freely between threads.

    Example
    -------
    >>> config = AuthenticatorConfig().with_code_length(8)
    >>> config.digits
    8
    """
    model_config = ConfigDict(frozen=True)

    digits: int = Field(default=6, ge=1)
    step_seconds: int = Field(default=30, ge=1)

    def with_code_length(self, digits: int) -> "AuthenticatorConfig":
        """
        Returns a copy of this config generating codes of the given length
        """
        return AuthenticatorConfig(digits=digits, step_seconds=self.step_seconds)


DEFAULT_CONFIG = AuthenticatorConfig()
