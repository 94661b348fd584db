from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from watchdog_checks.core.database import Base
from watchdog_checks.core.db_types import strpk, aware_datetime

from .monitor import Monitor


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Check(Base):
    __tablename__ = "checks"
    __table_args__ = (
        Index("ix_checks_monitor_created", "monitor_id", "created_at"),
    )

    id: Mapped[strpk]
    monitor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("monitors.id", ondelete="CASCADE"), nullable=False
    )

    status: Mapped[bool] = mapped_column(nullable=False)
    response_time: Mapped[float] = mapped_column(nullable=False)  # in milliseconds
    status_code: Mapped[int] = mapped_column(nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[aware_datetime] = mapped_column(default=utcnow, index=True)

    monitor: Mapped["Monitor"] = relationship(back_populates="checks")
