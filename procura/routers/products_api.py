"""
Urun REST API Router'i.

Endpoint'ler:
    GET    /           -> Urun listesi
    GET    /{id}       -> Urun detay
    POST   /           -> Yeni urun olustur
    DELETE /?id=       -> Urun sil

Urunler guncellenmez, sadece olusturulup silinir.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from procura.database import get_db
from procura.schemas.catalog import ProductCreate, ProductResponse
from procura.schemas.common import DeleteResponse
from procura.services import catalog as catalog_service

router = APIRouter()


@router.get("", response_model=list[ProductResponse])
def list_products(db: Annotated[Session, Depends(get_db)]):
    return catalog_service.get_products(db=db)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: Annotated[Session, Depends(get_db)]):
    return catalog_service.get_product(db=db, product_id=product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(data: ProductCreate, db: Annotated[Session, Depends(get_db)]):
    """
    Yeni urun olusturur.

    - type: Urun tipi/adi (zorunlu)
    - original_rate: Birim fiyat (zorunlu, sifir olamaz)
    - hsn: Siniflandirma kodu (opsiyonel)
    """
    return catalog_service.create_product(db=db, data=data)


@router.delete("", response_model=DeleteResponse)
def delete_product(
    db: Annotated[Session, Depends(get_db)],
    product_id: int | None = Query(default=None, alias="id", description="Silinecek urun id"),
):
    catalog_service.delete_product(db=db, product_id=product_id)
    return DeleteResponse()
