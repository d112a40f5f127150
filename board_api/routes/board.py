"""
Board routes: listings, detail, and author-only writes.
"""
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from typing import Optional

from ..auth import get_current_user, get_required_user
from ..models.category import Category
from ..models.user import User
from ..responses import paginated, success
from ..schemas.board import BoardUpdate, CommentCreate
from ..services.board_service import BoardService, get_board_service

router = APIRouter(prefix="/board", tags=["board"])


@router.get("/recent")
def get_all_recent_posts(service: BoardService = Depends(get_board_service)):
    """Get the most recently created boards."""
    return success(service.get_all_recent_posts())


@router.get("/recent-category")
def get_all_recent_by_category(
    category: Category,
    service: BoardService = Depends(get_board_service),
):
    """Get the most recently created boards in a category."""
    return success(service.get_all_recent_by_category(category))


@router.get("/category")
def get_all_posts_by_category(
    category: Category,
    page: Optional[int] = Query(None, ge=1),
    per_page: Optional[int] = Query(None, ge=1, le=100),
    service: BoardService = Depends(get_board_service),
):
    """Get every board in a category, optionally one page at a time."""
    items, total = service.get_all_posts_by_category(category, page, per_page)
    if page is None:
        return success(items)
    return paginated(items, total, page, per_page or service.settings.default_per_page)


@router.get("/{board_id}")
def get_post(
    board_id: int,
    current_user: Optional[User] = Depends(get_current_user),
    service: BoardService = Depends(get_board_service),
):
    """Get a board with its comments (optional auth)."""
    return success(service.get_post(board_id, current_user))


@router.post("")
def create_board(
    title: str = Form(..., min_length=1, max_length=200),
    content: str = Form(..., min_length=1),
    category: Category = Form(...),
    image: UploadFile = File(...),
    current_user: User = Depends(get_required_user),
    service: BoardService = Depends(get_board_service),
):
    """Create a board; the image is uploaded before the board is saved."""
    board = service.create_board(title, content, category, image, current_user)
    return success({"id": board.id}, "Board created")


@router.put("/{board_id}")
def update_board(
    board_id: int,
    board_update: BoardUpdate,
    current_user: User = Depends(get_required_user),
    service: BoardService = Depends(get_board_service),
):
    """Update a board (writer only)."""
    return success(service.update_board(board_id, board_update, current_user), "Board updated")


@router.delete("/{board_id}")
def delete_board(
    board_id: int,
    current_user: User = Depends(get_required_user),
    service: BoardService = Depends(get_board_service),
):
    """Delete a board (writer only)."""
    service.delete_board(board_id, current_user)
    return success(message="Board deleted")


@router.post("/{board_id}/comments")
def add_comment(
    board_id: int,
    comment: CommentCreate,
    current_user: User = Depends(get_required_user),
    service: BoardService = Depends(get_board_service),
):
    """Add a comment to a board."""
    return success(service.add_comment(board_id, comment.content, current_user))


@router.post("/{board_id}/heart")
def toggle_heart(
    board_id: int,
    current_user: User = Depends(get_required_user),
    service: BoardService = Depends(get_board_service),
):
    """Toggle the current user's heart on a board."""
    return success(service.toggle_heart(board_id, current_user))
