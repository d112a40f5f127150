"""
Heart (like) persistence queries.
"""
from typing import Dict, Iterable, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.heart import Heart


class HeartRepository:
    def __init__(self, db: Session):
        self.db = db

    def count_by_board(self, board_id: int) -> int:
        """Number of distinct members who liked the board."""
        return (
            self.db.query(func.count(func.distinct(Heart.member_id)))
            .filter(Heart.board_id == board_id)
            .scalar()
        ) or 0

    def count_by_boards(self, board_ids: Iterable[int]) -> Dict[int, int]:
        """Heart counts for several boards in one query; missing boards count 0."""
        board_ids = list(board_ids)
        if not board_ids:
            return {}
        rows = (
            self.db.query(Heart.board_id, func.count(func.distinct(Heart.member_id)))
            .filter(Heart.board_id.in_(board_ids))
            .group_by(Heart.board_id)
            .all()
        )
        counts = {board_id: 0 for board_id in board_ids}
        counts.update({board_id: count for board_id, count in rows})
        return counts

    def get(self, member_id: int, board_id: int) -> Optional[Heart]:
        return self.db.query(Heart).filter(
            Heart.member_id == member_id,
            Heart.board_id == board_id,
        ).first()

    def exists(self, member_id: int, board_id: int) -> bool:
        return self.get(member_id, board_id) is not None

    def add(self, heart: Heart) -> Heart:
        self.db.add(heart)
        self.db.flush()
        return heart

    def delete(self, heart: Heart) -> None:
        self.db.delete(heart)
        self.db.flush()
