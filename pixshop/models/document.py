# pixshop/models/document.py
from typing import List
from pydantic import Field
from .base import DocumentModel
from .order import Order
from .payment import PixSettings
from .product import Product

class StoreDocument(DocumentModel):
    """The whole persisted state of one deployment"""
    products: List[Product] = Field(default_factory=list)
    pix: PixSettings = Field(default_factory=PixSettings)
    orders: List[Order] = Field(default_factory=list)
