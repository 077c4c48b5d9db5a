"""Exceptions raised by the analysis core."""


class ProcessingError(RuntimeError):
    """An analysis run failed in one of its stages.

    The originating exception is kept on ``cause`` and chained as
    ``__cause__`` so tracebacks show both.
    """

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(f"{message}: {cause!r}")
        self.cause = cause
        self.__cause__ = cause


class ConfigurationError(ValueError):
    """A configuration value is out of range."""
