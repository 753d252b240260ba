"""Domain errors raised by the service layer.

Every error carries a stable ``code``. graphql-core copies ``extensions`` from
the original error, so responses show it as ``extensions.code``. A missing
viewer is never one of these; they are reserved for failed requests.
"""


class HomestayError(Exception):
    code = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict:
        return {"code": self.code}


class NotFound(HomestayError):
    code = "NOT_FOUND"


class HostNotFound(HomestayError):
    code = "HOST_NOT_FOUND"


class NotAuthorized(HomestayError):
    code = "NOT_AUTHORIZED"


class InvalidPagination(HomestayError):
    code = "INVALID_PAGINATION"


class QueryFailed(HomestayError):
    """A store call failed. The original exception is chained as ``__cause__``."""

    code = "QUERY_FAILED"
