"""
Teklif ve faturanin ortak alanlari.
Iki belge tipi ayni kalem/toplam yapisini kullanir, sadece numara alani farklidir.
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column

from procura.database import utcnow


class DocumentMixin:
    """
    Belge (teklif/fatura) kolonlari.

    Kalemler ayri tabloda tutulmaz, belge ile birlikte JSON olarak saklanir.
    Toplamlar kalem listesi her degistiginde bastan hesaplanir.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    # Musteri referansi (butunluk kontrolu yapilmaz, musteri silinse de belge kalir)
    client_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True
    )
    # Kalemler: [{"id", "description", "quantity", "rate", "amount", "type"}, ...]
    items: Mapped[list[dict]] = mapped_column(
        JSON, default=list
    )

    # Toplam tutarlar
    subtotal: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    tax_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    # Indirim alani modelde var ama hesaplamaya katilmiyor (her zaman 0)
    discount_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )
    total_cost: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00")
    )

    # Duzenleyen ve duzenlenme zamani
    issued_by: Mapped[str] = mapped_column(
        String(255), default="System"
    )
    issued_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
    # Durum: draft (taslak), issued (kesildi); serbest metin, enum degil
    status: Mapped[str] = mapped_column(
        String(20), default="draft"
    )
    # Olusturulan PDF referansi (su an kullanilmiyor)
    pdf_id: Mapped[str] = mapped_column(
        String(255), default=""
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow
    )
