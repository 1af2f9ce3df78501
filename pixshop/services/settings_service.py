# pixshop/services/settings_service.py
import logging
from typing import Optional
from ..models.payment import PixSettings
from ..utils.errors import ShopValidationError

class SettingsService:
    """PIX receiving settings"""

    def __init__(self, db):
        self.db = db
        self.logger = logging.getLogger(__name__)

    async def get_pix_settings(self) -> PixSettings:
        doc = await self.db.load()
        return doc.pix

    async def update_pix_settings(self, key: str, name: str, city: str,
                                  qr_url: Optional[str] = None) -> PixSettings:
        """Overwrite the PIX settings; the QR image is kept unless a new one is given"""
        key, name, city = (value.strip() if value else "" for value in (key, name, city))
        if not (key and name and city):
            raise ShopValidationError("❌ PIX key, name and city are all required.")

        async with self.db.transaction() as doc:
            doc.pix.key = key
            doc.pix.name = name
            doc.pix.city = city
            if qr_url:
                doc.pix.qr_url = qr_url
            pix = doc.pix.model_copy()

        self.logger.info("PIX settings updated")
        return pix
