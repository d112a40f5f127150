"""
Board persistence queries.
"""
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from ..models.board import Board
from ..models.category import Category


class BoardRepository:
    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, query):
        return query.order_by(Board.created_at.desc(), Board.id.desc())

    def get(self, board_id: int) -> Optional[Board]:
        return (
            self.db.query(Board)
            .options(joinedload(Board.member))
            .filter(Board.id == board_id)
            .first()
        )

    def find_recent(self, limit: int) -> List[Board]:
        """Most recently created boards, newest first."""
        return self._newest_first(self.db.query(Board)).limit(limit).all()

    def find_recent_by_category(self, category: Category, limit: int) -> List[Board]:
        query = self.db.query(Board).filter(Board.category == category.value)
        return self._newest_first(query).limit(limit).all()

    def find_all_by_category(
        self,
        category: Category,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Board]:
        query = self._newest_first(self.db.query(Board).filter(Board.category == category.value))
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_by_category(self, category: Category) -> int:
        return self.db.query(Board).filter(Board.category == category.value).count()

    def add(self, board: Board) -> Board:
        self.db.add(board)
        self.db.flush()
        return board

    def delete(self, board: Board) -> None:
        self.db.delete(board)
