"""Error types surfaced by the resume match validator."""


class ValidationFailed(Exception):
    """A validation run was aborted; no partial result exists.

    Callers should treat it as "analysis temporarily unavailable, please retry".
    """

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, code: str | None = None, cause: BaseException | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        self.cause = cause


class RecursionLimitExceeded(ValidationFailed):
    """The validator was re-entered deeper than its configured bound."""

    code = "RECURSION_LIMIT"

    def __init__(self, depth: int, limit: int):
        super().__init__(f"Validation re-entered at depth {depth} (limit {limit})")
        self.depth = depth
        self.limit = limit
