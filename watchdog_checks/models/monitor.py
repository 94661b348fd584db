from typing import TYPE_CHECKING

from sqlalchemy import String, func, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from watchdog_checks.core.database import Base
from watchdog_checks.core.db_types import strpk, aware_datetime

from .team import Team

if TYPE_CHECKING:
    from .check import Check


class Monitor(Base):
    __tablename__ = "monitors"

    id: Mapped[strpk]
    team_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("teams.id", ondelete="CASCADE"), index=True
    )

    # Updated by the data layer every time a check is stored
    last_check_status: Mapped[bool] = mapped_column(nullable=True)

    created_at: Mapped[aware_datetime] = mapped_column(server_default=func.now())

    team: Mapped["Team"] = relationship(back_populates="monitors")
    checks: Mapped[list["Check"]] = relationship(
        back_populates="monitor", passive_deletes=True
    )
