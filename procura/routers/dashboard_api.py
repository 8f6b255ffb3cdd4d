"""Panel (dashboard) API: fatura ozeti."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from procura.database import get_db
from procura.schemas.document import InvoiceStats
from procura.services import invoice as invoice_service

router = APIRouter()


@router.get("/stats", response_model=InvoiceStats)
def dashboard_stats(db: Annotated[Session, Depends(get_db)]):
    """
    Toplam fatura sayisi, toplam ciro ve bekleyen (taslak) tutar.
    """
    return invoice_service.get_invoice_stats(db=db)
