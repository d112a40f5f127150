"""
Heart model: one member's like on one board.
"""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class Heart(Base):
    __tablename__ = "hearts"

    id = Column(Integer, primary_key=True, index=True)
    board_id = Column(Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)
    member_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # One heart per member per board
    __table_args__ = (UniqueConstraint("board_id", "member_id", name="uq_heart_board_member"),)

    # Relationships
    board = relationship("Board", back_populates="hearts")
    member = relationship("User", back_populates="hearts")
