"""
Teklif (Quotation) servis katmani.
Teklif CRUD islemleri; toplam hesaplari document.py uzerinden yapilir.
"""
from sqlalchemy.orm import Session

from procura.config import settings
from procura.models.quotation import Quotation
from procura.schemas.document import DocumentCreate, DocumentUpdate
from procura.services import document
from procura.services.store import ResourceStore

store = ResourceStore(Quotation, "Quotation")


def get_quotations(
    db: Session, client_id: int | None = None, quotation_status: str | None = None,
) -> list[Quotation]:
    """Teklif listesi. Musteri ve durum filtresi opsiyonel."""
    return store.list(db, client_id=client_id, status=quotation_status or None)


def get_quotation(db: Session, quotation_id: int) -> Quotation:
    """Tek bir teklifi getir. Bulunamazsa 404 dondurur."""
    return store.get(db, quotation_id)


def create_quotation(db: Session, data: DocumentCreate) -> Quotation:
    """Yeni teklif olustur. Numara: QT-<epoch ms>."""
    return document.create_document(
        db, store, data,
        prefix=settings.QUOTATION_PREFIX, number_field="quotation_number",
    )


def update_quotation(db: Session, data: DocumentUpdate) -> Quotation:
    """Teklif durumunu ve/veya kalemlerini guncelle."""
    return document.update_document(db, store, data)


def delete_quotation(db: Session, quotation_id: int | None) -> None:
    store.delete(db, quotation_id)
