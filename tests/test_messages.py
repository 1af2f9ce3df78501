from datetime import datetime, timezone
from decimal import Decimal

import discord
import pytest

from pixshop.models.cart import CartLine, CartSummary
from pixshop.models.order import Order, OrderStatus
from pixshop.models.payment import PixSettings
from pixshop.models.product import Product
from pixshop.utils.keyboards import NO_PRODUCTS, Keyboards
from pixshop.utils.messages import EMPTY_CART, Messages
from pixshop.utils.tokens import Action, ActionToken

PIX = PixSettings(key="key@example.com", name="Ana", city="SP", qr_url="https://cdn.example/qr.png")


def summary():
    return CartSummary(items=[
        CartLine(product_id="p_1", name="Gift card", quantity=2, unit_price=Decimal("19.90")),
        CartLine(product_id="p_2", name="Sticker", quantity=1, unit_price=Decimal("5.00")),
    ])


def order(**kwargs):
    values = dict(
        id="o_1",
        product_id="p_1",
        product_name="Gift card",
        price=Decimal("19.90"),
        buyer_id="111",
        channel_id="9001",
        created_at=datetime(2024, 1, 1, 15, 0, tzinfo=timezone.utc),
    )
    values.update(kwargs)
    return Order(**values)


def test_cart_text_lists_lines_and_total():
    text = Messages.cart_text(summary())

    assert text == (
        "• Gift card x2 — R$ 39.80\n"
        "• Sticker x1 — R$ 5.00\n\n"
        "**Total:** R$ 44.80"
    )
    assert Messages.cart_text(CartSummary()) == EMPTY_CART


def test_payment_instructions_embed():
    embed = Messages.payment_instructions(111, summary(), PIX)

    assert "<@111>" in embed.description
    assert "`key@example.com`" in embed.description
    assert "**Total:** R$ 44.80" in embed.description
    assert embed.image.url == PIX.qr_url


def test_payment_instructions_without_qr():
    embed = Messages.payment_instructions(111, summary(), PIX.model_copy(update={"qr_url": ""}))

    assert embed.image.url is None


def test_order_list_most_recent_first():
    older = order(id="o_1")
    newer = order(id="o_2", status=OrderStatus.PAID,
                  paid_at=datetime(2024, 1, 2, 15, 0, tzinfo=timezone.utc))

    text = Messages.order_list([older, newer])

    assert text.index("o_2") < text.index("o_1")
    assert "✅ `o_2`" in text
    assert "⏳ `o_1`" in text
    assert Messages.order_list([]) == "📭 No orders found."


def test_delivery_falls_back_to_manual_notice():
    assert "shortly" in Messages.delivery(order(), "")
    assert "CODE-123" in Messages.delivery(order(), "CODE-123")


def test_product_list_is_capped_at_25_fields():
    products = [
        Product(id=f"p_{i}", channel_id="501", name=f"Item {i}", price=Decimal("1"))
        for i in range(30)
    ]

    embed = Messages.product_list(products, "store")

    assert len(embed.fields) == 25
    assert embed.fields[0].name == "Item 0 — R$ 1.00"


def custom_ids(view: discord.ui.View):
    return [item.custom_id for item in view.children]


@pytest.mark.asyncio
async def test_panel_buttons_are_shared():
    assert custom_ids(Keyboards.panel()) == ["open_menu", "view_cart"]


@pytest.mark.asyncio
async def test_cart_buttons_are_bound_to_customer_and_channel():
    view = Keyboards.cart(111, 501, can_checkout=False)

    assert custom_ids(view) == ["add_more:111:501", "clear_cart:111:501", "checkout:111:501"]
    assert view.children[2].disabled
    for custom_id in custom_ids(view):
        assert ActionToken.decode(custom_id).owner_id == 111


@pytest.mark.asyncio
async def test_ticket_buttons_are_bound_to_owner():
    assert custom_ids(Keyboards.ticket(111)) == ["paid:111", "close:111"]


@pytest.mark.asyncio
async def test_product_picker_options():
    products = [Product(id="p_1", channel_id="501", name="Gift card", price=Decimal("19.90"))]

    select = Keyboards.product_picker(products, 111, 501).children[0]

    assert ActionToken.decode(select.custom_id) == ActionToken(
        action=Action.ADD_TO_CART, owner_id=111, scope_id=501
    )
    assert [(o.label, o.value) for o in select.options] == [("Gift card — R$ 19.90", "p_1")]
    assert not select.disabled


@pytest.mark.asyncio
async def test_empty_product_picker_is_disabled():
    select = Keyboards.product_picker([], 111, 501).children[0]

    assert select.disabled
    assert select.options[0].value == NO_PRODUCTS


def test_free_items_are_still_listed():
    free = CartSummary(items=[
        CartLine(product_id="p_3", name="Free sample", quantity=1, unit_price=Decimal("0")),
    ])

    assert free.is_empty
    assert Messages.cart_text(free) == "• Free sample x1 — R$ 0.00\n\n**Total:** R$ 0.00"
