# happy_index/models/__init__.py
from happy_index.models.user import User
from happy_index.models.mood import Mood
from happy_index.models.like import Like
from happy_index.models.comment import Comment

__all__ = ["User", "Mood", "Like", "Comment"]
