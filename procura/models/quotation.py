from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from procura.database import Base
from procura.models.document import DocumentMixin


class Quotation(DocumentMixin, Base):
    """Teklif modeli. Numara formati: QT-<olusturma zamani, epoch ms>."""

    __tablename__ = "quotations"
    __table_args__ = {"sqlite_autoincrement": True}

    quotation_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True, index=True
    )
