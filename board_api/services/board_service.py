"""
Board business rules: listing, detail composition, and author-only writes.
"""
from typing import List, Optional, Tuple

from fastapi import Depends, UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..config import get_settings
from ..database import get_db, transaction
from ..exceptions import NotFoundBoardError, NotValidWriterError
from ..logging_config import service_logger
from ..models.board import Board
from ..models.category import Category
from ..models.comment import Comment
from ..models.heart import Heart
from ..models.user import User
from ..repositories import BoardRepository, CommentRepository, HeartRepository
from ..schemas.board import BoardUpdate
from .storage import S3UploadService, get_upload_service

BOARD_IMAGE_DIR = "board"


def board_to_list_item(board: Board, heart_num: int) -> dict:
    """Convert a Board to a list entry."""
    return {
        "id": board.id,
        "title": board.title,
        "image": board.image,
        "category": board.category,
        "heart_num": heart_num,
        "created_at": board.created_at.isoformat(),
    }


def comment_to_dict(comment: Comment) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "created_at": comment.created_at.isoformat(),
        "writer": comment.member.name,
        "image": comment.member.image,
    }


class BoardService:
    def __init__(self, db: Session, uploader: Optional[S3UploadService] = None):
        self.db = db
        self.uploader = uploader
        self.boards = BoardRepository(db)
        self.comments = CommentRepository(db)
        self.hearts = HeartRepository(db)
        self.settings = get_settings()

    # ------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------

    def _to_list_items(self, boards: List[Board]) -> List[dict]:
        counts = self.hearts.count_by_boards(board.id for board in boards)
        return [board_to_list_item(board, counts[board.id]) for board in boards]

    def get_all_recent_posts(self) -> List[dict]:
        return self._to_list_items(self.boards.find_recent(self.settings.recent_limit))

    def get_all_recent_by_category(self, category: Category) -> List[dict]:
        boards = self.boards.find_recent_by_category(category, self.settings.recent_limit)
        return self._to_list_items(boards)

    def get_all_posts_by_category(
        self,
        category: Category,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> Tuple[List[dict], int]:
        """
        All boards in a category with the category total.

        Without ``page`` every board is returned; otherwise only that page.
        """
        if page is None:
            boards = self.boards.find_all_by_category(category)
            return self._to_list_items(boards), len(boards)

        per_page = per_page or self.settings.default_per_page
        boards = self.boards.find_all_by_category(
            category, offset=(page - 1) * per_page, limit=per_page
        )
        return self._to_list_items(boards), self.boards.count_by_category(category)

    def _find_board(self, board_id: int) -> Board:
        board = self.boards.get(board_id)
        if board is None:
            raise NotFoundBoardError(board_id)
        return board

    def get_post(self, board_id: int, member: Optional[User] = None) -> dict:
        """
        Compose a board's detail view.

        ``member_name`` and ``heart`` describe the viewer and are only filled
        in when a member is signed in.
        """
        board = self._find_board(board_id)
        comments = self.comments.find_by_board_newest_first(board.id)

        detail = {
            "id": board.id,
            "title": board.title,
            "image": board.image,
            "category": board.category,
            "writer": board.member.name,
            "content": board.content,
            "created_at": board.created_at.isoformat(),
            "heart_num": self.hearts.count_by_board(board.id),
            "comments": [comment_to_dict(c) for c in comments],
            "member_name": None,
            "heart": False,
        }

        if member is not None:
            detail["member_name"] = member.name
            detail["heart"] = self.hearts.exists(member.id, board.id)

        return detail

    # ------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------

    def _check_writer(self, board: Board, member: User) -> None:
        if board.member_id != member.id:
            service_logger.warning(
                "Rejected write by non-writer",
                board_id=board.id,
                writer_id=board.member_id,
                member_id=member.id,
            )
            raise NotValidWriterError()

    def create_board(
        self,
        title: str,
        content: str,
        category: Category,
        image: UploadFile,
        member: User,
    ) -> Board:
        # Upload errors propagate before anything is written
        image_url = self.uploader.upload(image, BOARD_IMAGE_DIR)

        try:
            with transaction(self.db):
                board = self.boards.add(Board(
                    title=title,
                    content=content,
                    category=category.value,
                    image=image_url,
                    member_id=member.id,
                ))
        except Exception as e:
            service_logger.error(
                "Board not saved; uploaded image left orphaned",
                error=e,
                image=image_url,
                member_id=member.id,
            )
            raise

        service_logger.info("Board created", board_id=board.id, member_id=member.id)
        return board

    def update_board(self, board_id: int, update: BoardUpdate, member: User) -> dict:
        with transaction(self.db):
            board = self._find_board(board_id)
            self._check_writer(board, member)

            for key, value in update.model_dump(exclude_unset=True).items():
                if value is None:
                    continue
                if isinstance(value, Category):
                    value = value.value
                setattr(board, key, value)

        service_logger.info("Board updated", board_id=board_id, member_id=member.id)
        return board_to_list_item(board, self.hearts.count_by_board(board_id))

    def delete_board(self, board_id: int, member: User) -> None:
        with transaction(self.db):
            board = self._find_board(board_id)
            self._check_writer(board, member)
            self.boards.delete(board)

        service_logger.info("Board deleted", board_id=board_id, member_id=member.id)

    def add_comment(self, board_id: int, content: str, member: User) -> dict:
        with transaction(self.db):
            board = self._find_board(board_id)
            comment = self.comments.add(Comment(board_id=board.id, member_id=member.id, content=content))

        return comment_to_dict(comment)

    def toggle_heart(self, board_id: int, member: User) -> dict:
        """Add the member's heart to a board, or take it back if already given."""
        try:
            with transaction(self.db):
                board = self._find_board(board_id)
                heart = self.hearts.get(member.id, board.id)
                if heart is not None:
                    self.hearts.delete(heart)
                else:
                    self.hearts.add(Heart(board_id=board.id, member_id=member.id))
                heart_num = self.hearts.count_by_board(board.id)
        except IntegrityError:
            # A concurrent toggle stored the same heart first; report what is stored now
            service_logger.info("Concurrent heart toggle", board_id=board_id, member_id=member.id)
            board = self._find_board(board_id)
            return {
                "board_id": board_id,
                "heart": self.hearts.exists(member.id, board.id),
                "heart_num": self.hearts.count_by_board(board.id),
            }

        return {
            "board_id": board_id,
            "heart": heart is None,
            "heart_num": heart_num,
        }


def get_board_service(
    db: Session = Depends(get_db),
    uploader: S3UploadService = Depends(get_upload_service),
) -> BoardService:
    return BoardService(db, uploader)
