from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from procura.database import Base
from procura.models.document import DocumentMixin


class Invoice(DocumentMixin, Base):
    """Fatura modeli. Numara formati: INV-<olusturma zamani, epoch ms>."""

    __tablename__ = "invoices"
    __table_args__ = {"sqlite_autoincrement": True}

    invoice_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True, index=True
    )
