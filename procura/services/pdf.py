"""
PDF parametre dogrulamasi.
PDF dosyasi tarayicida uretilir; burada sadece gerekli alanlar kontrol edilir
ve parametreler arayuze geri dondurulur.
"""
import logging

from fastapi import HTTPException, status
from pydantic import ValidationError

from procura.schemas.pdf import PdfParameters

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "number", "clientName", "items")


def prepare_pdf_parameters(payload) -> dict:
    """
    PDF parametrelerini dogrula.

    - Govde JSON nesnesi degilse veya alan tipleri bozuksa: 500
    - title, number, clientName veya items eksik/bossa: 400
    """
    if not isinstance(payload, dict):
        logger.error("PDF parametreleri JSON nesnesi degil: %s", type(payload).__name__)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        )

    if any(not payload.get(field) for field in REQUIRED_FIELDS):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields",
        )

    try:
        params = PdfParameters.model_validate(payload)
    except ValidationError as e:
        logger.error("PDF parametreleri gecersiz: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate PDF",
        )

    return {
        "success": True,
        "message": "PDF generation parameters validated",
        # Gonderilmeyen alanlar yanitta da yer almaz, gonderilenler aynen doner
        "data": params.model_dump(by_alias=True, exclude_unset=True),
    }
