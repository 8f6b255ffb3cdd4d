"""
Fatura REST API Router'i.

Endpoint'ler:
    GET    /                       -> Fatura listesi (clientId ve status filtresi)
    GET    /{id}                   -> Fatura detay
    POST   /                       -> Yeni fatura olustur
    PUT    /                       -> Fatura guncelle (durum, kalemler)
    DELETE /?id=                   -> Fatura sil
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from procura.database import get_db
from procura.schemas.common import DeleteResponse
from procura.schemas.document import DocumentCreate, DocumentUpdate, InvoiceResponse
from procura.services import invoice as invoice_service

router = APIRouter()


@router.get("", response_model=list[InvoiceResponse])
def list_invoices(
    db: Annotated[Session, Depends(get_db)],
    client_id: int | None = Query(default=None, alias="clientId", description="Musteriye gore filtrele"),
    invoice_status: str | None = Query(default=None, alias="status", description="Durum filtresi (draft/issued)"),
):
    """
    Fatura listesi, eklenme sirasina gore.

    Ornek:
        GET /api/invoices?clientId=1&status=draft
    """
    return invoice_service.get_invoices(
        db=db, client_id=client_id, invoice_status=invoice_status,
    )


@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(invoice_id: int, db: Annotated[Session, Depends(get_db)]):
    return invoice_service.get_invoice(db=db, invoice_id=invoice_id)


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(data: DocumentCreate, db: Annotated[Session, Depends(get_db)]):
    """Yeni fatura olusturur. Kurallar teklif ile ayni."""
    return invoice_service.create_invoice(db=db, data=data)


@router.put("", response_model=InvoiceResponse)
def update_invoice(data: DocumentUpdate, db: Annotated[Session, Depends(get_db)]):
    return invoice_service.update_invoice(db=db, data=data)


@router.delete("", response_model=DeleteResponse)
def delete_invoice(
    db: Annotated[Session, Depends(get_db)],
    invoice_id: int | None = Query(default=None, alias="id", description="Silinecek fatura id"),
):
    invoice_service.delete_invoice(db=db, invoice_id=invoice_id)
    return DeleteResponse()
