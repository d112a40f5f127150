"""
Closed set of board categories.
"""
import enum


class Category(str, enum.Enum):
    FREE = "FREE"
    QUESTION = "QUESTION"
    REVIEW = "REVIEW"
    TIP = "TIP"
