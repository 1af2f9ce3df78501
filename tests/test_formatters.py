from datetime import datetime
from decimal import Decimal

import pytz

from pixshop.config import Config
from pixshop.utils.formatters import format_datetime, format_price, ticket_channel_name, truncate


def test_format_price():
    assert format_price(Decimal("39.8")) == "R$ 39.80"
    assert format_price(Decimal("0")) == "R$ 0.00"
    assert format_price(Decimal("1234.5")) == "R$ 1234.50"


def test_format_datetime_uses_store_timezone(monkeypatch):
    monkeypatch.setattr(Config, "TIMEZONE", "America/Sao_Paulo")

    assert format_datetime(datetime(2024, 1, 1, 15, 0)) == "2024-01-01 12:00:00"
    assert format_datetime(pytz.utc.localize(datetime(2024, 7, 1, 3, 30))) == "2024-07-01 00:30:00"


def test_ticket_channel_name():
    assert ticket_channel_name("Ana.Souza_99") == "ticket-anasouza99"
    assert ticket_channel_name("João") == "ticket-joo"
    assert len(ticket_channel_name("x" * 200)) == 90


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("a" * 20, 10) == "a" * 9 + "…"
    assert truncate(None, 10) == ""
