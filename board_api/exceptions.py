"""
Board domain errors, translated to HTTP by the global exception handler.
"""
from .responses import ApiException


class NotFoundBoardError(ApiException):
    def __init__(self, board_id: int = None):
        message = "Board not found" if board_id is None else f"Board '{board_id}' not found"
        super().__init__(404, message, "NOT_FOUND_BOARD")


class NotValidWriterError(ApiException):
    def __init__(self):
        super().__init__(403, "Only the writer can modify this board", "NOT_VALID_WRITER")


class StorageUploadError(ApiException):
    """Raised when the object store rejects or fails an upload."""

    def __init__(self, message: str = "Failed to upload image"):
        super().__init__(502, message, "UPLOAD_FAILED")


class FileTooLargeError(ApiException):
    def __init__(self, max_size_mb: int):
        super().__init__(
            413,
            f"File size exceeds {max_size_mb}MB limit",
            "FILE_TOO_LARGE",
            {"max_size_mb": max_size_mb},
        )
