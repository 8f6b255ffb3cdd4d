"""
Musteri REST API Router'i.

Endpoint'ler:
    GET    /           -> Musteri listesi
    GET    /{id}       -> Musteri detay
    POST   /           -> Yeni musteri olustur
    PUT    /           -> Musteri guncelle (id govdede)
    DELETE /?id=       -> Musteri sil

Bu router main.py'de su sekilde eklenir:
    app.include_router(clients.router, prefix="/api/clients", tags=["Clients"])
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from procura.database import get_db
from procura.schemas.client import ClientCreate, ClientUpdate, ClientResponse
from procura.schemas.common import DeleteResponse
from procura.services import client as client_service

router = APIRouter()


@router.get("", response_model=list[ClientResponse])
def list_clients(db: Annotated[Session, Depends(get_db)]):
    """Tum musteriler, eklenme sirasina gore."""
    return client_service.get_clients(db=db)


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, db: Annotated[Session, Depends(get_db)]):
    """Musteri detayi. Bulunamazsa 404."""
    return client_service.get_client(db=db, client_id=client_id)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(data: ClientCreate, db: Annotated[Session, Depends(get_db)]):
    """
    Yeni musteri olustur.

    - name zorunlu, bos olamaz
    - discount_value 0-15 arasinda olmali (varsayilan 0)
    """
    return client_service.create_client(db=db, data=data)


@router.put("", response_model=ClientResponse)
def update_client(data: ClientUpdate, db: Annotated[Session, Depends(get_db)]):
    """
    Musteriyi gunceller (partial update).
    Sadece gonderilen alanlar degisir, ornek: {"id": 1, "discount_value": 10}
    """
    return client_service.update_client(db=db, data=data)


@router.delete("", response_model=DeleteResponse)
def delete_client(
    db: Annotated[Session, Depends(get_db)],
    client_id: int | None = Query(default=None, alias="id", description="Silinecek musteri id"),
):
    """Musteriyi siler. Musteriye ait teklif ve faturalar silinmez."""
    client_service.delete_client(db=db, client_id=client_id)
    return DeleteResponse()
