"""
User (member) model for authentication and authorship.
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from ..database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(100), unique=True, nullable=False)
    image = Column(String(1000), nullable=True)  # profile image url
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    boards = relationship("Board", back_populates="member", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="member", cascade="all, delete-orphan")
    hearts = relationship("Heart", back_populates="member", cascade="all, delete-orphan")
