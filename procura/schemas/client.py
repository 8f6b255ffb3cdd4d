from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict, field_validator

from procura.config import settings


class ClientCreate(BaseModel):
    """Yeni musteri olusturmak icin. Sadece name zorunlu."""
    name: str = Field(min_length=1, max_length=255)
    gst_in: str = ""
    address: str = ""
    email_id: str = ""
    discount_value: float = Field(default=0, ge=0, le=settings.MAX_CLIENT_DISCOUNT)

    @field_validator("gst_in", "address", "email_id", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("discount_value", mode="before")
    @classmethod
    def null_to_zero(cls, value):
        return 0 if value is None else value


class ClientUpdate(BaseModel):
    """
    Musteri guncellemek icin. id disindaki tum alanlar opsiyonel (partial update).
    Gonderilmeyen veya null gelen alanlar eski degerini korur.
    """
    id: int | None = None
    name: str | None = Field(default=None, max_length=255)
    gst_in: str | None = None
    address: str | None = None
    email_id: str | None = None
    discount_value: float | None = Field(default=None, ge=0, le=settings.MAX_CLIENT_DISCOUNT)


class ClientResponse(BaseModel):
    """Musteri bilgisi dondurmek icin"""
    id: int
    name: str
    gst_in: str
    address: str
    email_id: str
    discount_value: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
