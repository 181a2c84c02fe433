"""ORM models."""

from models.base import Base
from models.player import PlayerRecord

__all__ = ["Base", "PlayerRecord"]
