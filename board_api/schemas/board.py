from pydantic import BaseModel, Field
from typing import Optional

from ..models.category import Category


class BoardUpdate(BaseModel):
    """Fields an author may change on an existing board."""
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    category: Optional[Category] = None


class CommentCreate(BaseModel):
    content: str = Field(min_length=1)
