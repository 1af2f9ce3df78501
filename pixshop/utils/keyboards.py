# pixshop/utils/keyboards.py
from typing import List
import discord
from ..models.product import Product
from .formatters import format_price, truncate
from .tokens import Action, ActionToken

NO_PRODUCTS = "none"
MAX_OPTIONS = 25

def _button(label: str, emoji: str, style: discord.ButtonStyle, token: ActionToken,
            disabled: bool = False) -> discord.ui.Button:
    return discord.ui.Button(
        label=label,
        emoji=emoji,
        style=style,
        custom_id=token.encode(),
        disabled=disabled
    )

def _view(*items: discord.ui.Item) -> discord.ui.View:
    # Clicks are routed by custom id in CallbackHandler; a stopped view is
    # still rendered but never kept in the client's view store
    view = discord.ui.View(timeout=None)
    for item in items:
        view.add_item(item)
    view.stop()
    return view

class Keyboards:
    @staticmethod
    def panel() -> discord.ui.View:
        """Buttons under the store panel"""
        return _view(
            _button("Buy", "🛒", discord.ButtonStyle.primary, ActionToken(action=Action.OPEN_MENU)),
            _button("View cart", "🧾", discord.ButtonStyle.secondary, ActionToken(action=Action.VIEW_CART)),
        )

    @staticmethod
    def product_picker(products: List[Product], owner_id: int, channel_id: int) -> discord.ui.View:
        """Single-choice product menu, disabled when the channel has no products"""
        token = ActionToken(action=Action.ADD_TO_CART, owner_id=owner_id, scope_id=channel_id)
        if not products:
            select = discord.ui.Select(
                custom_id=token.encode(),
                placeholder="No products in this channel",
                options=[discord.SelectOption(label="No products registered", value=NO_PRODUCTS)],
                disabled=True
            )
        else:
            select = discord.ui.Select(
                custom_id=token.encode(),
                placeholder="Choose a product",
                min_values=1,
                max_values=1,
                options=[
                    discord.SelectOption(
                        label=truncate(f"{p.name} — {format_price(p.price)}", 100),
                        description=truncate(p.description, 100) or "No description",
                        value=p.id
                    )
                    for p in products[:MAX_OPTIONS]
                ]
            )
        return _view(select)

    @staticmethod
    def cart(owner_id: int, channel_id: int, can_checkout: bool) -> discord.ui.View:
        def token(action: Action) -> ActionToken:
            return ActionToken(action=action, owner_id=owner_id, scope_id=channel_id)

        return _view(
            _button("Add more", "➕", discord.ButtonStyle.secondary, token(Action.ADD_MORE)),
            _button("Empty", "🗑️", discord.ButtonStyle.danger, token(Action.CLEAR_CART)),
            _button("Checkout", "✅", discord.ButtonStyle.success, token(Action.CHECKOUT),
                    disabled=not can_checkout),
        )

    @staticmethod
    def confirm_order(owner_id: int, channel_id: int) -> discord.ui.View:
        def token(action: Action) -> ActionToken:
            return ActionToken(action=action, owner_id=owner_id, scope_id=channel_id)

        return _view(
            _button("Confirm purchase", "✅", discord.ButtonStyle.success, token(Action.CONFIRM_ORDER)),
            _button("Cancel", "↩️", discord.ButtonStyle.secondary, token(Action.CANCEL_ORDER)),
        )

    @staticmethod
    def ticket(owner_id: int) -> discord.ui.View:
        return _view(
            _button("I've paid", "💸", discord.ButtonStyle.success,
                    ActionToken(action=Action.PAID, owner_id=owner_id)),
            _button("Close ticket", "🔒", discord.ButtonStyle.secondary,
                    ActionToken(action=Action.CLOSE, owner_id=owner_id)),
        )
