class Html5CheckError(Exception):
    """Base class for html5check errors."""


class ConfigLoadingError(Html5CheckError):
    """Configuration file is missing, unreadable or invalid."""


class MissingPageClientError(Html5CheckError):
    """A page was requested but no page client was provided."""


class MalformedValidatorResponseError(Html5CheckError):
    """The validator answered with something that is not a JSON message list."""

    def __init__(self, reason: str, body: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.body = body

    def __str__(self) -> str:
        excerpt = self.body if len(self.body) <= 200 else self.body[:200] + "..."
        return f"{self.reason}: {excerpt!r}"
