from .auth import UserCreate, UserLogin, UserResponse, TokenResponse, RefreshRequest
from .board import BoardUpdate, CommentCreate

__all__ = [
    "UserCreate", "UserLogin", "UserResponse", "TokenResponse", "RefreshRequest",
    "BoardUpdate", "CommentCreate",
]
