"""
Teklif ve fatura icin ortak servis fonksiyonlari.

Iki belge tipi ayni akisi izler; farklari numara oneki ve numara alani.
quotation.py ve invoice.py bu fonksiyonlari kendi deposu ile cagirir.
"""
import logging
import math

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from procura.config import settings
from procura.database import utcnow
from procura.schemas.document import DocumentCreate, DocumentUpdate, LineItem
from procura.services.numbering import generate_document_number
from procura.services.store import ResourceStore
from procura.services.totals import calculate_totals, money

logger = logging.getLogger(__name__)


def _priced_fields(items: list[LineItem], tax_percentage: float | None) -> dict:
    """
    Kalem listesi ve toplam alanlari (her zaman birlikte yazilir).
    Kalem tutarlari da kurusa yuvarlanarak saklanir, boylece ara toplam
    saklanan tutarlarin toplamina esit kalir.
    """
    items = [item.model_copy(update={"amount": float(money(item.amount))}) for item in items]
    totals = calculate_totals(items, tax_percentage or 0)
    # Toplamlar JSON sayisi (float) olarak dondurulur
    if not all(math.isfinite(float(v)) for v in (totals.subtotal, totals.tax_amount, totals.total_cost)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Document totals are out of range",
        )
    return {
        "items": [item.model_dump() for item in items],
        "subtotal": totals.subtotal,
        "tax_amount": totals.tax_amount,
        "discount_amount": totals.discount_amount,
        "total_cost": totals.total_cost,
    }


def create_document(
    db: Session, store: ResourceStore, data: DocumentCreate,
    prefix: str, number_field: str,
):
    """
    Yeni belge olustur.
    Musteri varligi kontrol edilmez; durum her zaman 'draft' ile baslar.
    """
    now = utcnow()
    record = store.model(
        client_id=data.client_id,
        issued_by=data.issued_by or settings.DEFAULT_ISSUER,
        issued_time=now,
        status="draft",
        pdf_id="",
        created_at=now,
        **_priced_fields(data.items, data.tax_percentage),
        **{number_field: generate_document_number(prefix)},
    )
    return store.create(db, record)


def update_document(db: Session, store: ResourceStore, data: DocumentUpdate):
    """
    Belgenin durumunu ve/veya kalemlerini guncelle.

    Kalemler gonderildiyse toplamlar bu istekteki tax_percentage ile bastan
    hesaplanir. Vergi orani belgede saklanmadigi icin oran gonderilmezse
    vergi %0 olarak yeniden hesaplanir.
    """
    changes = {}
    if data.items is not None:
        if not data.tax_percentage:
            logger.info(
                "%s #%s kalemleri vergi orani olmadan guncelleniyor, vergi sifirlanir",
                store.label, data.id,
            )
        changes.update(_priced_fields(data.items, data.tax_percentage))
    if data.status:
        changes["status"] = data.status
    return store.update(db, data.id, changes)
