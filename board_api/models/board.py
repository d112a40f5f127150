"""
Board model for forum posts.
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class Board(Base):
    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    image = Column(String(1000), nullable=False)  # stored object url
    category = Column(String(30), nullable=False, index=True)  # Category value
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    member = relationship("User", back_populates="boards")
    comments = relationship("Comment", back_populates="board", cascade="all, delete-orphan")
    hearts = relationship("Heart", back_populates="board", cascade="all, delete-orphan")
