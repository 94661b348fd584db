from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from watchdog_checks.core.database import Base
from watchdog_checks.core.db_types import strpk, str_100, aware_datetime

if TYPE_CHECKING:
    from .monitor import Monitor


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[strpk]
    name: Mapped[str_100] = mapped_column(nullable=True)

    created_at: Mapped[aware_datetime] = mapped_column(server_default=func.now())

    monitors: Mapped[list["Monitor"]] = relationship(back_populates="team")
