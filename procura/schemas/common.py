from pydantic import BaseModel


class DeleteResponse(BaseModel):
    """Silme islemi sonucu."""
    success: bool = True
