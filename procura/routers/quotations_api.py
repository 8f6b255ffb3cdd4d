"""
Teklif REST API Router'i.

Endpoint'ler:
    GET    /                       -> Teklif listesi (clientId ve status filtresi)
    GET    /{id}                   -> Teklif detay
    POST   /                       -> Yeni teklif olustur
    PUT    /                       -> Teklif guncelle (durum, kalemler)
    DELETE /?id=                   -> Teklif sil
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from procura.database import get_db
from procura.schemas.common import DeleteResponse
from procura.schemas.document import DocumentCreate, DocumentUpdate, QuotationResponse
from procura.services import quotation as quotation_service

router = APIRouter()


@router.get("", response_model=list[QuotationResponse])
def list_quotations(
    db: Annotated[Session, Depends(get_db)],
    client_id: int | None = Query(default=None, alias="clientId", description="Musteriye gore filtrele"),
    quotation_status: str | None = Query(default=None, alias="status", description="Durum filtresi (draft/issued)"),
):
    """
    Teklif listesi, eklenme sirasina gore.

    Ornek:
        GET /api/quotations?clientId=1&status=draft
    """
    return quotation_service.get_quotations(
        db=db, client_id=client_id, quotation_status=quotation_status,
    )


@router.get("/{quotation_id}", response_model=QuotationResponse)
def get_quotation(quotation_id: int, db: Annotated[Session, Depends(get_db)]):
    return quotation_service.get_quotation(db=db, quotation_id=quotation_id)


@router.post("", response_model=QuotationResponse, status_code=status.HTTP_201_CREATED)
def create_quotation(data: DocumentCreate, db: Annotated[Session, Depends(get_db)]):
    """
    Yeni teklif olusturur.

    - client_id ve en az bir kalem zorunlu
    - tax_percentage: vergi orani % (varsayilan 0)
    - issued_by: bos ise "System"
    """
    return quotation_service.create_quotation(db=db, data=data)


@router.put("", response_model=QuotationResponse)
def update_quotation(data: DocumentUpdate, db: Annotated[Session, Depends(get_db)]):
    """
    Teklif durumunu ve/veya kalemlerini gunceller.
    Kalemler gonderilirse toplamlar bu istekteki tax_percentage ile yeniden hesaplanir.
    """
    return quotation_service.update_quotation(db=db, data=data)


@router.delete("", response_model=DeleteResponse)
def delete_quotation(
    db: Annotated[Session, Depends(get_db)],
    quotation_id: int | None = Query(default=None, alias="id", description="Silinecek teklif id"),
):
    quotation_service.delete_quotation(db=db, quotation_id=quotation_id)
    return DeleteResponse()
