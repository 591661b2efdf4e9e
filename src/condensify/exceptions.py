"""Custom exceptions for the summary backend."""


class MissingInputError(Exception):
    """Raised when a required request field is missing or empty."""

    def __init__(self, fields: tuple[str, ...], message: str):
        self.fields = fields
        super().__init__(message)


class InvalidUploadError(Exception):
    """Raised when an uploaded transcript cannot be read as text."""

    def __init__(self, file_name: str | None, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Invalid transcript upload '{file_name}': {reason}")


class InvalidChunkConfigError(Exception):
    """Raised when chunk length and overlap cannot make progress through a text."""

    def __init__(self, max_length: int, overlap: int):
        self.max_length = max_length
        self.overlap = overlap
        super().__init__(
            f"Invalid chunking configuration: max_length={max_length}, "
            f"overlap={overlap} (require max_length > overlap >= 0)"
        )


class SummarizationError(Exception):
    """Raised when the summarization service call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class EmailDeliveryError(Exception):
    """Raised when sending a summary email fails."""

    def __init__(self, recipient: str, cause: Exception | None = None):
        self.recipient = recipient
        self.cause = cause
        super().__init__(f"Failed to send email to '{recipient}': {cause}")
