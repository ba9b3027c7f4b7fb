"""
Media Domain Errors.
"""


class MediaToolError(Exception):
    """Raised when an external media tool or file operation fails.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
