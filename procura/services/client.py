from sqlalchemy.orm import Session

from procura.models.client import Client
from procura.schemas.client import ClientCreate, ClientUpdate
from procura.services.store import ResourceStore


store = ResourceStore(Client, "Client")


def get_clients(db: Session) -> list[Client]:
    """Tum musterileri eklenme sirasina gore dondur."""
    return store.list(db)


def get_client(db: Session, client_id: int) -> Client:
    """Tek bir musteriyi getir. Bulunamazsa 404 dondurur."""
    return store.get(db, client_id)


def create_client(db: Session, data: ClientCreate) -> Client:
    """Yeni musteri olustur. Indirim orani sema tarafinda 0-15 araliginda dogrulanir."""
    return store.create(db, Client(**data.model_dump()))


def update_client(db: Session, data: ClientUpdate) -> Client:
    """
    Musteriyi guncelle.
    exclude_unset + exclude_none: sadece gonderilen (null olmayan) alanlari gunceller.
    Bos isim gelirse mevcut isim korunur.
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"id"})
    if changes.get("name") == "":
        changes.pop("name")
    return store.update(db, data.id, changes)


def delete_client(db: Session, client_id: int | None) -> None:
    """Musteriyi sil. Musteriye ait teklif/faturalar silinmez."""
    store.delete(db, client_id)
