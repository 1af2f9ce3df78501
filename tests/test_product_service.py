from decimal import Decimal

import pytest

from pixshop.models.order import OrderStatus
from pixshop.utils.errors import ProductNotFoundError, ShopValidationError
from tests.fakes import CHANNEL, CUSTOMER, OTHER_CHANNEL


@pytest.mark.asyncio
async def test_add_product_scoped_to_channel(products):
    product = await products.add_product("Gift Card", 19.90, CHANNEL, "Digital code")

    listed = await products.list_active(CHANNEL)

    assert [p.id for p in listed] == [product.id]
    assert listed[0].price == Decimal("19.90")
    assert listed[0].channel_id == str(CHANNEL)
    assert listed[0].active
    assert await products.list_active(OTHER_CHANNEL) == []


@pytest.mark.asyncio
async def test_product_ids_are_unique(products):
    first = await products.add_product("A", 1, CHANNEL)
    second = await products.add_product("B", 2, CHANNEL)

    assert first.id != second.id
    assert first.id.startswith("p_")


@pytest.mark.asyncio
async def test_list_keeps_storage_order(products):
    names = ["Gift Card", "Sticker", "Poster"]
    for name in names:
        await products.add_product(name, 1, CHANNEL)

    assert [p.name for p in await products.list_active(CHANNEL)] == names


@pytest.mark.asyncio
@pytest.mark.parametrize("name, price", [
    ("", 10),
    ("   ", 10),
    ("Gift Card", -1),
    ("Gift Card", "abc"),
    ("Gift Card", float("nan")),
    ("x" * 101, 10),
])
async def test_add_product_rejects_invalid_input(products, name, price):
    with pytest.raises(ShopValidationError):
        await products.add_product(name, price, CHANNEL)

    assert await products.list_active(CHANNEL) == []


@pytest.mark.asyncio
async def test_free_products_are_allowed(products):
    product = await products.add_product("Sample", 0, CHANNEL)

    assert product.price == Decimal("0.00")


@pytest.mark.asyncio
async def test_find_active_respects_scope(products):
    product = await products.add_product("Gift Card", 10, CHANNEL)

    assert await products.find_active(product.id, CHANNEL) == product
    assert await products.find_active(product.id, OTHER_CHANNEL) is None
    assert await products.find_active("p_missing", CHANNEL) is None


@pytest.mark.asyncio
async def test_find_active_by_name_ignores_case(products):
    product = await products.add_product("Gift Card", 10, CHANNEL)

    assert await products.find_active_by_name("  gift CARD ", CHANNEL) == product
    assert await products.find_active_by_name("Gift Card", OTHER_CHANNEL) is None


@pytest.mark.asyncio
async def test_deactivate_hides_product_but_keeps_it(products):
    product = await products.add_product("Gift Card", 10, CHANNEL)

    removed = await products.deactivate(product.id, CHANNEL)

    assert removed.active is False
    assert await products.list_active(CHANNEL) == []
    assert await products.find_active(product.id, CHANNEL) is None
    stored = await products.get_product(product.id)
    assert stored is not None and stored.active is False


@pytest.mark.asyncio
async def test_deactivate_outside_scope_is_rejected(products):
    product = await products.add_product("Gift Card", 10, CHANNEL)

    with pytest.raises(ProductNotFoundError):
        await products.deactivate(product.id, OTHER_CHANNEL)
    with pytest.raises(ProductNotFoundError):
        await products.deactivate("p_missing", CHANNEL)

    assert (await products.get_product(product.id)).active


@pytest.mark.asyncio
async def test_deactivation_does_not_touch_order_snapshots(products, settings, orders, channels):
    product = await products.add_product("Gift Card", "19.90", CHANNEL)
    await settings.update_pix_settings("key", "Ana", "SP")
    order, _ticket = await orders.purchase(CUSTOMER, "ana", "Gift Card", CHANNEL, channels)

    await products.deactivate(product.id, CHANNEL)

    stored = await orders.get_order(order.id)
    assert stored.product_name == "Gift Card"
    assert stored.price == Decimal("19.90")
    assert stored.status == OrderStatus.PENDING
