from .board import BoardRepository
from .comment import CommentRepository
from .heart import HeartRepository

__all__ = [
    "BoardRepository",
    "CommentRepository",
    "HeartRepository",
]
