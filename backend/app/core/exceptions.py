class SneakerSearchError(Exception):
    """Base class for sneaker search failures."""


class MissingQueryError(SneakerSearchError):
    """Raised when a search is requested without a query."""

    def __init__(self, message: str = "Missing query"):
        super().__init__(message)


class PageFetchError(SneakerSearchError):
    """Raised when the page fetcher fails to return the source pages."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class MalformedPageError(SneakerSearchError):
    """Raised when fetched content has no usable text."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Page content for {key} has no text")


class QuizStateError(Exception):
    """Raised when the quiz is driven outside the answering phase."""
