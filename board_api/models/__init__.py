from .category import Category
from .user import User
from .board import Board
from .comment import Comment
from .heart import Heart

__all__ = [
    "Category",
    "User",
    "Board",
    "Comment",
    "Heart",
]
