from .board_service import BoardService, get_board_service
from .storage import S3UploadService, get_upload_service

__all__ = [
    "BoardService",
    "get_board_service",
    "S3UploadService",
    "get_upload_service",
]
