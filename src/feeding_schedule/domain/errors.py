"""Errors raised while generating the feeding schedule."""


class ConfigurationError(ValueError):
    """Raised when schedule parameters cannot produce a valid schedule."""


class PersistenceError(RuntimeError):
    """Raised when the schedule store fails to read or write."""

    def __init__(self, step: str, detail: str | None = None) -> None:
        message = f"{step} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.step = step
        self.detail = detail
