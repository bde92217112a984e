# ABOUTME: Error taxonomy surfaced by the quiz pipeline and its collaborators
# ABOUTME: Validation, fetch, not-found and conflict failures share one base class


class WikiQuizError(Exception):
    """Base class for every failure the quiz pipeline reports to its caller."""

    pass


class ValidationError(WikiQuizError):
    """Raised when caller input is malformed, e.g. a URL that is not a Wikipedia article."""

    def __init__(self, message: str, field: str | None = "url"):
        super().__init__(message)
        self.message = message
        self.field = field


class FetchError(WikiQuizError):
    """Raised when article markup cannot be retrieved.

    ``status_code`` carries the upstream HTTP status, or ``None`` when the
    request never produced a response.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(WikiQuizError):
    """Raised when a stored quiz lookup by id finds nothing."""

    pass


class ConflictError(WikiQuizError):
    """Raised when a record for the same url and content hash already exists."""

    pass
