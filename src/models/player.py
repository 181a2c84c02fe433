"""players table model."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, DateTime, Index, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class PlayerRecord(Base):
    """Stored roster entry. Inactive rows are soft-deleted players."""

    __tablename__ = "players"
    __table_args__ = (
        CheckConstraint("speed BETWEEN 1 AND 3", name="ck_players_speed"),
        CheckConstraint("technical_skills BETWEEN 1 AND 3", name="ck_players_technical_skills"),
        CheckConstraint("stamina BETWEEN 1 AND 3", name="ck_players_stamina"),
        Index("idx_players_active_name", "is_active", "name"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    speed: Mapped[int] = mapped_column(Integer, nullable=False)
    technical_skills: Mapped[int] = mapped_column(Integer, nullable=False)
    stamina: Mapped[int] = mapped_column(Integer, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)
