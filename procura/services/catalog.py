"""
Urun ve hizmet servis katmani.
Iki kaynak da sadece listelenir, olusturulur ve silinir; guncelleme yoktur.
"""
from sqlalchemy.orm import Session

from procura.models.product import Product
from procura.models.service import Service
from procura.schemas.catalog import ProductCreate, ServiceCreate
from procura.services.store import ResourceStore

product_store = ResourceStore(Product, "Product")
service_store = ResourceStore(Service, "Service")


def get_products(db: Session) -> list[Product]:
    return product_store.list(db)


def get_product(db: Session, product_id: int) -> Product:
    return product_store.get(db, product_id)


def create_product(db: Session, data: ProductCreate) -> Product:
    return product_store.create(db, Product(**data.model_dump()))


def delete_product(db: Session, product_id: int | None) -> None:
    product_store.delete(db, product_id)


def get_services(db: Session) -> list[Service]:
    return service_store.list(db)


def get_service(db: Session, service_id: int) -> Service:
    return service_store.get(db, service_id)


def create_service(db: Session, data: ServiceCreate) -> Service:
    return service_store.create(db, Service(**data.model_dump()))


def delete_service(db: Session, service_id: int | None) -> None:
    service_store.delete(db, service_id)
