"""Urun ve hizmet semalari. Ikisi de sadece olusturulup silinebilir."""
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict, field_validator


def _non_zero(value: float) -> float:
    if value == 0:
        raise ValueError("must be a non-zero number")
    return value


class ProductCreate(BaseModel):
    type: str = Field(min_length=1, max_length=255)
    original_rate: float
    hsn: str = ""

    @field_validator("original_rate")
    @classmethod
    def validate_rate(cls, value: float) -> float:
        return _non_zero(value)

    @field_validator("hsn", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return "" if value is None else value


class ProductResponse(BaseModel):
    id: int
    type: str
    original_rate: float
    hsn: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ServiceCreate(BaseModel):
    type: str = Field(min_length=1, max_length=255)
    original_cost: float
    hsn: str = ""

    @field_validator("original_cost")
    @classmethod
    def validate_cost(cls, value: float) -> float:
        return _non_zero(value)

    @field_validator("hsn", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return "" if value is None else value


class ServiceResponse(BaseModel):
    id: int
    type: str
    original_cost: float
    hsn: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
