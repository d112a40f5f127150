from .auth import router as auth_router
from .board import router as board_router

__all__ = [
    "auth_router",
    "board_router",
]
