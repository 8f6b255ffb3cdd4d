# Tum modelleri buradan import ediyoruz
# Boylece Base.metadata.create_all tum tablolari gorebilir
from procura.models.client import Client
from procura.models.product import Product
from procura.models.service import Service
from procura.models.quotation import Quotation
from procura.models.invoice import Invoice

__all__ = ["Client", "Product", "Service", "Quotation", "Invoice"]
