"""
Hizmet REST API Router'i.
Urun router'i ile ayni yapi; fiyat alani original_cost.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from procura.database import get_db
from procura.schemas.catalog import ServiceCreate, ServiceResponse
from procura.schemas.common import DeleteResponse
from procura.services import catalog as catalog_service

router = APIRouter()


@router.get("", response_model=list[ServiceResponse])
def list_services(db: Annotated[Session, Depends(get_db)]):
    return catalog_service.get_services(db=db)


@router.get("/{service_id}", response_model=ServiceResponse)
def get_service(service_id: int, db: Annotated[Session, Depends(get_db)]):
    return catalog_service.get_service(db=db, service_id=service_id)


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
def create_service(data: ServiceCreate, db: Annotated[Session, Depends(get_db)]):
    return catalog_service.create_service(db=db, data=data)


@router.delete("", response_model=DeleteResponse)
def delete_service(
    db: Annotated[Session, Depends(get_db)],
    service_id: int | None = Query(default=None, alias="id", description="Silinecek hizmet id"),
):
    catalog_service.delete_service(db=db, service_id=service_id)
    return DeleteResponse()
