"""
PDF parametre semalari.
PDF tarayicida uretilir; sunucu sadece parametreleri dogrular ve geri dondurur.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PdfItem(BaseModel):
    """Kalemin diger alanlari (id, type, ...) oldugu gibi geri dondurulur."""
    description: str = ""
    quantity: float = 0
    rate: float = 0
    amount: float = 0

    model_config = ConfigDict(extra="allow")


class PdfParameters(BaseModel):
    """Arayuzun gonderdigi alan adlari camelCase (clientName, taxPercentage, ...)."""
    title: str
    number: str
    client_name: str
    date: str | None = None
    items: list[PdfItem]
    subtotal: float | None = None
    tax: float | None = None
    tax_percentage: float | None = None
    total: float | None = None
    issued_by: str | None = None
    notes: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PdfResponse(BaseModel):
    success: bool = True
    message: str
    data: dict
