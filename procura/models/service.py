from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column

from procura.database import Base, utcnow


class Service(Base):
    """
    Hizmet modeli.
    Urun ile ayni yapida, fiyat alani original_cost.
    """

    __tablename__ = "services"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    type: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    original_cost: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False
    )
    hsn: Mapped[str] = mapped_column(
        String(20), default=""
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
