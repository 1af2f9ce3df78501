# pixshop/services/product_service.py
import logging
import secrets
import time
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union
from ..models.product import Product, to_price
from ..utils.errors import ProductNotFoundError, ShopValidationError

NAME_MAX = 100

def new_product_id() -> str:
    return f"p_{int(time.time() * 1000)}_{secrets.token_hex(2)}"

class ProductService:
    """Per-channel product catalog"""

    def __init__(self, db):
        self.db = db
        self.logger = logging.getLogger(__name__)

    async def add_product(self, name: str, price: Union[Decimal, float, str],
                          channel_id: Optional[int], description: str = "",
                          image_url: str = "", delivery: str = "") -> Product:
        """Add an active product to a channel's catalog"""
        name = (name or "").strip()
        if not name:
            raise ShopValidationError("❌ Product name is required.")
        if len(name) > NAME_MAX:
            raise ShopValidationError(f"❌ Product name must be at most {NAME_MAX} characters.")
        try:
            price = to_price(price)
        except (InvalidOperation, ValueError):
            raise ShopValidationError("❌ Price must be a number greater than or equal to zero.") from None

        product = Product(
            id=new_product_id(),
            channel_id=str(channel_id) if channel_id is not None else None,
            name=name,
            price=price,
            description=(description or "").strip(),
            image_url=image_url or "",
            delivery=(delivery or "").strip(),
        )
        async with self.db.transaction() as doc:
            doc.products.append(product)

        self.logger.info(f"Product {product.id} ({product.name}) added to channel {channel_id}")
        return product

    async def list_active(self, scope_id: Optional[int]) -> List[Product]:
        """Active products of a channel, in storage order"""
        doc = await self.db.load()
        return [p for p in doc.products if p.active and p.in_scope(scope_id)]

    async def find_active(self, product_id: str, scope_id: Optional[int]) -> Optional[Product]:
        for product in await self.list_active(scope_id):
            if product.id == product_id:
                return product
        return None

    async def find_active_by_name(self, name: str, scope_id: Optional[int]) -> Optional[Product]:
        wanted = (name or "").strip().casefold()
        for product in await self.list_active(scope_id):
            if product.name.casefold() == wanted:
                return product
        return None

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Any product, active or not"""
        doc = await self.db.load()
        return next((p for p in doc.products if p.id == product_id), None)

    async def deactivate(self, product_id: str, scope_id: Optional[int]) -> Product:
        """Soft-delete a product of this channel"""
        async with self.db.transaction() as doc:
            product = next(
                (p for p in doc.products if p.id == product_id and p.in_scope(scope_id)),
                None
            )
            if product is None:
                raise ProductNotFoundError()
            product.active = False

        self.logger.info(f"Product {product_id} deactivated in channel {scope_id}")
        return product
