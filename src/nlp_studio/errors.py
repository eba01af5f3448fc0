"""Error types shared by the dispatcher, the history store and the API layer."""


class NLPStudioError(Exception):
    """Base class for all application errors."""


class AnalysisValidationError(NLPStudioError, ValueError):
    """Request fields are missing or invalid."""


class UnsupportedOperation(NLPStudioError, ValueError):
    """Operation is not one of the known OperationKind values."""

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Unsupported operation: {operation!r}")


class NotFound(NLPStudioError, KeyError):
    """No history record carries the requested id."""

    def __init__(self, record_id):
        self.record_id = record_id
        super().__init__(record_id)

    def __str__(self) -> str:
        return f"Analysis {self.record_id} not found"


class InternalError(NLPStudioError, RuntimeError):
    """Unexpected fault inside the dispatcher or a strategy."""
