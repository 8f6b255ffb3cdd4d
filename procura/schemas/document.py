"""
Teklif ve fatura Pydantic semalari.
Kalem (LineItem) ve istek/yanit modelleri iki belge tipi icin ortaktir.
"""
import math
import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator


class LineItem(BaseModel):
    """
    Belge kalemi.
    amount gonderilmezse quantity x rate olarak hesaplanir, gonderilirse oldugu gibi alinir.
    Negatif miktar/fiyat reddedilmez.
    """
    id: str | None = None
    description: str = ""
    quantity: float = 0
    rate: float = 0
    amount: float | None = None
    type: Literal["product", "service"] = "product"

    model_config = ConfigDict(allow_inf_nan=False)

    @field_validator("id", mode="before")
    @classmethod
    def id_as_text(cls, value):
        # Arayuz kalem id'si olarak zaman damgasi (sayi) gonderebiliyor
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def derive_amount(self) -> "LineItem":
        if self.amount is None:
            self.amount = self.quantity * self.rate
            if not math.isfinite(self.amount):
                raise ValueError("amount is out of range")
        return self


def _normalize_items(items: list[LineItem]) -> list[LineItem]:
    """Eksik kalem id'lerini uret, belge icinde tekrar eden id'yi reddet."""
    seen: set[str] = set()
    for item in items:
        if item.id is None:
            item.id = uuid.uuid4().hex[:12]
        if item.id in seen:
            raise ValueError(f"duplicate item id '{item.id}'")
        seen.add(item.id)
    return items


class DocumentCreate(BaseModel):
    """Teklif/fatura olusturma semasi."""
    client_id: int
    items: list[LineItem] = Field(min_length=1)
    issued_by: str | None = None
    # Vergi orani (yuzde); belgede saklanmaz, sadece toplamlari etkiler
    tax_percentage: float | None = 0

    model_config = ConfigDict(allow_inf_nan=False)

    @field_validator("client_id")
    @classmethod
    def validate_client(cls, value: int) -> int:
        if value == 0:
            raise ValueError("client is required")
        return value

    @field_validator("items")
    @classmethod
    def validate_items(cls, items: list[LineItem]) -> list[LineItem]:
        return _normalize_items(items)


class DocumentUpdate(BaseModel):
    """
    Teklif/fatura guncelleme semasi.
    Sadece durum ve kalem listesi degistirilebilir. Kalemler gonderilirse
    toplamlar bu istekteki tax_percentage ile (yoksa %0) yeniden hesaplanir.
    """
    id: int | None = None
    status: str | None = None
    items: list[LineItem] | None = None
    tax_percentage: float | None = 0

    model_config = ConfigDict(allow_inf_nan=False)

    @field_validator("items")
    @classmethod
    def validate_items(cls, items: list[LineItem] | None) -> list[LineItem] | None:
        if items is None:
            return items
        return _normalize_items(items)


class DocumentResponse(BaseModel):
    """Iki belge tipinin ortak yanit alanlari."""
    id: int
    client_id: int
    items: list[LineItem] = []
    subtotal: float
    tax_amount: float
    discount_amount: float
    total_cost: float
    issued_by: str
    issued_time: datetime
    status: str
    pdf_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class QuotationResponse(DocumentResponse):
    quotation_number: str


class InvoiceResponse(DocumentResponse):
    invoice_number: str


class InvoiceStats(BaseModel):
    """Panel (dashboard) icin fatura ozeti."""
    total_invoices: int
    total_revenue: float
    pending_amount: float
    by_status: dict[str, int]
