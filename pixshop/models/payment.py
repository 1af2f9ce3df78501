# pixshop/models/payment.py
from .base import DocumentModel

class PixSettings(DocumentModel):
    """Where buyers send their PIX transfer"""
    key: str = ""
    name: str = ""
    city: str = ""
    qr_url: str = ""

    @property
    def is_configured(self) -> bool:
        return all(value.strip() for value in (self.key, self.name, self.city))
