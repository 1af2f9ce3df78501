from decimal import Decimal

import pytest

from pixshop.database.database import Database
from pixshop.services.cart_service import CartService
from pixshop.services.order_service import OrderService
from pixshop.services.product_service import ProductService
from pixshop.services.settings_service import SettingsService
from pixshop.services.ticket_service import TicketService
from tests.fakes import FakeTicketChannels


@pytest.fixture
def db(tmp_path):
    return Database(tmp_path / "db.json")


@pytest.fixture
def products(db):
    return ProductService(db)


@pytest.fixture
def settings(db):
    return SettingsService(db)


@pytest.fixture
def carts():
    return CartService()


@pytest.fixture
def tickets(carts, products, settings):
    return TicketService(carts, products, settings, close_delay=0)


@pytest.fixture
def orders(db, products, settings):
    return OrderService(db, products, settings)


@pytest.fixture
def channels():
    return FakeTicketChannels()


@pytest.fixture
def gift_card_price():
    return Decimal("19.90")
