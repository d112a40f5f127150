"""
Comment persistence queries.
"""
from typing import List

from sqlalchemy.orm import Session, joinedload

from ..models.comment import Comment


class CommentRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_board_newest_first(self, board_id: int) -> List[Comment]:
        return (
            self.db.query(Comment)
            .options(joinedload(Comment.member))
            .filter(Comment.board_id == board_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
            .all()
        )

    def add(self, comment: Comment) -> Comment:
        self.db.add(comment)
        self.db.flush()
        return comment
