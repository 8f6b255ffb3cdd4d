from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Text, DateTime, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column

from procura.database import Base, utcnow


class Client(Base):
    """
    Musteri modeli.
    Teklif ve faturalarin kesildigi firmalari/kisileri temsil eder.
    """

    __tablename__ = "clients"
    # AUTOINCREMENT: silinen kaydin id'si tekrar kullanilmaz
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Musteri bilgileri
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    # Vergi kayit numarasi (GSTIN)
    gst_in: Mapped[str] = mapped_column(
        String(50), default=""
    )
    address: Mapped[str] = mapped_column(
        Text, default=""
    )
    email_id: Mapped[str] = mapped_column(
        String(255), default=""
    )
    # Indirim orani (yuzde, 0-15 arasi)
    discount_value: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), default=Decimal("0.00")
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
