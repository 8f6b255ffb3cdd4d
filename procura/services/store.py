"""
Kayit deposu (ResourceStore).

Her kaynak tipi (musteri, urun, hizmet, teklif, fatura) icin bir ornek olusturulur.
Listeleme, getirme, olusturma, guncelleme ve silme islemleri burada toplanir;
servis katmani tablo detaylarini bilmeden bu arayuzu kullanir.

Kimlik atama (AUTOINCREMENT) ve ekleme ayni kilit ve ayni islem (transaction)
icinde yapilir. Boylece paralel iki istek ayni id'yi alamaz.
"""
import logging
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from procura.database import Base, store_lock

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def _locked_transaction(db: Session):
    """Kilidi al, blok bitince commit et; hata olursa rollback yap."""
    with store_lock:
        try:
            yield
            db.commit()
        except Exception:
            db.rollback()
            raise


class ResourceStore(Generic[ModelT]):
    """Tek bir model icin CRUD islemleri."""

    def __init__(self, model: type[ModelT], label: str) -> None:
        self.model = model
        # Hata mesajlarinda kullanilan isim (ornek: "Client")
        self.label = label

    def list(self, db: Session, **filters: Any) -> list[ModelT]:
        """
        Kayitlari eklenme sirasina gore dondurur.
        filters: alan=deger esitlik filtreleri, None olanlar yok sayilir.
        """
        with _locked_transaction(db):
            query = db.query(self.model)
            for field, value in filters.items():
                if value is not None:
                    query = query.filter(getattr(self.model, field) == value)
            records = query.order_by(self.model.id.asc()).all()
        return records

    def get(self, db: Session, record_id: int) -> ModelT:
        """Tek kayit getir. Bulunamazsa 404 dondurur."""
        with _locked_transaction(db):
            record = self._get_or_404(db, record_id)
        return record

    def create(self, db: Session, record: ModelT) -> ModelT:
        """Kaydi ekle, id ve olusturma zamani atanmis halini dondur."""
        with _locked_transaction(db):
            db.add(record)
            db.flush()
            db.refresh(record)
        logger.info("%s #%s olusturuldu", self.label, record.id)
        return record

    def update(self, db: Session, record_id: int | None, changes: dict[str, Any]) -> ModelT:
        """
        Gonderilen alanlari mevcut kaydin uzerine yaz.
        changes icinde olmayan alanlar eski degerini korur.
        """
        if not record_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{self.label} ID is required",
            )
        with _locked_transaction(db):
            record = self._get_or_404(db, record_id)
            for field, value in changes.items():
                setattr(record, field, value)
            db.flush()
            db.refresh(record)
        logger.info("%s #%s guncellendi (%s)", self.label, record_id, ", ".join(changes) or "-")
        return record

    def delete(self, db: Session, record_id: int | None) -> None:
        """Kaydi sil. Bagli kayitlara dokunulmaz (cascade yok)."""
        if not record_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="ID is required",
            )
        with _locked_transaction(db):
            record = self._get_or_404(db, record_id)
            db.delete(record)
        logger.info("%s #%s silindi", self.label, record_id)

    def _get_or_404(self, db: Session, record_id: int) -> ModelT:
        record = db.get(self.model, record_id)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.label} not found",
            )
        return record
