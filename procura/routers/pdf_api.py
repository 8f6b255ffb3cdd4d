"""PDF API: tarayicida uretilecek PDF icin parametre dogrulamasi."""
import logging

from fastapi import APIRouter, HTTPException, Request, status

from procura.config import settings
from procura.rate_limit import limiter
from procura.schemas.pdf import PdfResponse
from procura.services import pdf as pdf_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=PdfResponse)
@limiter.limit(settings.PDF_RATE_LIMIT)
async def generate_pdf(request: Request):
    """
    PDF parametrelerini dogrular ve geri dondurur.
    Govde okunamazsa (gecersiz JSON) 500 doner.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        logger.error("PDF istegi okunamadi: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        )
    return pdf_service.prepare_pdf_parameters(payload)
