"""
Fatura (Invoice) servis katmani.
Fatura CRUD islemleri ve panel icin fatura istatistikleri.
"""
from decimal import Decimal

from sqlalchemy.orm import Session

from procura.config import settings
from procura.models.invoice import Invoice
from procura.schemas.document import DocumentCreate, DocumentUpdate
from procura.services import document
from procura.services.store import ResourceStore

store = ResourceStore(Invoice, "Invoice")


def get_invoices(
    db: Session, client_id: int | None = None, invoice_status: str | None = None,
) -> list[Invoice]:
    """Fatura listesi. Musteri ve durum filtresi opsiyonel."""
    return store.list(db, client_id=client_id, status=invoice_status or None)


def get_invoice(db: Session, invoice_id: int) -> Invoice:
    """Tek bir faturayi getir. Bulunamazsa 404 dondurur."""
    return store.get(db, invoice_id)


def create_invoice(db: Session, data: DocumentCreate) -> Invoice:
    """Yeni fatura olustur. Numara: INV-<epoch ms>."""
    return document.create_document(
        db, store, data,
        prefix=settings.INVOICE_PREFIX, number_field="invoice_number",
    )


def update_invoice(db: Session, data: DocumentUpdate) -> Invoice:
    """Fatura durumunu ve/veya kalemlerini guncelle."""
    return document.update_document(db, store, data)


def delete_invoice(db: Session, invoice_id: int | None) -> None:
    store.delete(db, invoice_id)


def get_invoice_stats(db: Session) -> dict:
    """
    Fatura istatistikleri (panel).
    pending_amount: taslak durumundaki faturalarin toplami.
    """
    invoices = store.list(db)
    total_revenue = sum((i.total_cost for i in invoices), Decimal("0"))
    pending_amount = sum(
        (i.total_cost for i in invoices if i.status == "draft"), Decimal("0")
    )

    by_status = {}
    for i in invoices:
        by_status[i.status] = by_status.get(i.status, 0) + 1

    return {
        "total_invoices": len(invoices),
        "total_revenue": total_revenue,
        "pending_amount": pending_amount,
        "by_status": by_status,
    }
