# pixshop/utils/formatters.py
import re
from datetime import datetime
import pytz
from decimal import Decimal
from ..config import Config

TICKET_NAME_MAX = 90

def format_price(amount: Decimal) -> str:
    """Price in reais, always two decimal places"""
    return f"R$ {Decimal(amount):.2f}"

def format_datetime(dt: datetime) -> str:
    """Timestamp in the store's timezone"""
    local_tz = pytz.timezone(Config.TIMEZONE)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(local_tz).strftime("%Y-%m-%d %H:%M:%S")

def ticket_channel_name(username: str) -> str:
    """Discord-safe name for a buyer's ticket channel"""
    slug = re.sub(r"[^a-z0-9-]", "", f"ticket-{username}".lower())
    return slug[:TICKET_NAME_MAX]

def truncate(text: str, limit: int) -> str:
    text = text or ""
    return text if len(text) <= limit else text[:limit - 1] + "…"
