class check_fail:
    """
    Context that exits silently on an expected error, optionally checking its message.
    If there was no error on leaving the context, raise one.

    Example
    -------
    >>> with check_fail(InvalidSecretLength, match="length"):
    >>>     decode_secret("TOO2SHORT")
    """

    def __init__(self, exception_type: type[Exception] = Exception, match: str | None = None):
        self.exception_type = exception_type
        self.match = match
        self.exception: Exception | None = None

    def __enter__(self) -> "check_fail":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if isinstance(exc_value, self.exception_type):
            if self.match is not None and self.match not in str(exc_value):
                raise AssertionError(f"Expected '{self.match}' in the error message, got '{exc_value}'") from exc_value
            self.exception = exc_value
            return True
        elif exc_value is not None:
            return False
        raise AssertionError(f"This should have raised {self.exception_type.__name__}.")
