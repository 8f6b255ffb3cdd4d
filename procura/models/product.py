from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column

from procura.database import Base, utcnow


class Product(Base):
    """
    Urun modeli.
    Teklif/fatura kalemi olarak secilebilecek urunleri temsil eder.
    Olusturulduktan sonra guncellenmez, sadece silinebilir.
    """

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Urun tipi/adi
    type: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    # Birim fiyat
    # Numeric(12, 2) = toplam 12 basamak, 2'si ondalik
    original_rate: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False
    )
    # Siniflandirma kodu (HSN)
    hsn: Mapped[str] = mapped_column(
        String(20), default=""
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
