# pixshop/utils/messages.py
from typing import List, Optional
import discord
from ..models.cart import CartSummary
from ..models.order import Order, OrderStatus
from ..models.payment import PixSettings
from ..models.product import Product
from .formatters import format_datetime, format_price, truncate

EMPTY_CART = "Your cart is empty."

class Messages:
    @staticmethod
    def cart_text(summary: CartSummary) -> str:
        """Itemised cart with its total"""
        if not summary.items:
            return EMPTY_CART
        lines = "\n".join(f"• {line}" for line in summary.lines)
        return f"{lines}\n\n**Total:** {format_price(summary.total)}"

    @staticmethod
    def panel(title: str, description: str, footer: str = "",
              image_url: str = "") -> discord.Embed:
        embed = discord.Embed(title=title, description=description)
        if footer:
            embed.set_footer(text=footer)
        if image_url:
            embed.set_image(url=image_url)
        return embed

    @staticmethod
    def product_list(products: List[Product], channel_name: str) -> discord.Embed:
        embed = discord.Embed(
            title=f"📦 Products in #{channel_name}",
            description="Use `/product remove id:...` to deactivate a product."
        )
        # Discord caps an embed at 25 fields
        for product in products[:25]:
            embed.add_field(
                name=f"{product.name} — {format_price(product.price)}",
                value=f"ID: `{product.id}`\n{truncate(product.description or 'No description', 200)}",
                inline=False
            )
        return embed

    @staticmethod
    def product_added(product: Product) -> str:
        return (
            f"✅ Product added **to this channel** (<#{product.channel_id}>):\n"
            f"• **{product.name}** — {format_price(product.price)}\n"
            f"• ID: `{product.id}`"
        )

    @staticmethod
    def cart_updated(summary: CartSummary, product: Optional[Product] = None) -> discord.Embed:
        embed = discord.Embed(title="🧾 Cart updated", description=Messages.cart_text(summary))
        if product is not None and product.image_url:
            embed.set_thumbnail(url=product.image_url)
        return embed

    @staticmethod
    def cart(summary: CartSummary) -> str:
        return f"🧾 **Your cart (this channel):**\n{Messages.cart_text(summary)}"

    @staticmethod
    def review(summary: CartSummary) -> discord.Embed:
        return discord.Embed(title="✅ Review order", description=Messages.cart_text(summary))

    @staticmethod
    def pix_block(pix: PixSettings) -> str:
        return (
            f"**PIX (copy and paste):**\n"
            f"• **Key:** `{pix.key}`\n"
            f"• **Name:** {pix.name}\n"
            f"• **City:** {pix.city}"
        )

    @staticmethod
    def payment_instructions(owner_id: int, summary: CartSummary,
                             pix: PixSettings) -> discord.Embed:
        """Message posted in a new ticket"""
        embed = discord.Embed(
            title="💳 PIX payment",
            description=(
                f"Hello <@{owner_id}>!\n\n"
                f"**Items:**\n{Messages.cart_text(summary)}\n\n"
                f"{Messages.pix_block(pix)}\n\n"
                f"📌 Once you have paid, press **I've paid**."
            )
        )
        if pix.qr_url:
            embed.set_image(url=pix.qr_url)
        return embed

    @staticmethod
    def order_instructions(order: Order, pix: PixSettings) -> discord.Embed:
        embed = discord.Embed(
            title=f"💳 Order `{order.id}`",
            description=(
                f"Hello <@{order.buyer_id}>!\n\n"
                f"**Product:** {order.product_name}\n"
                f"**Amount:** {format_price(order.price)}\n\n"
                f"{Messages.pix_block(pix)}\n\n"
                f"📌 Once you have paid, press **I've paid**. "
                f"Your product is delivered here after an admin confirms the payment."
            )
        )
        if pix.qr_url:
            embed.set_image(url=pix.qr_url)
        return embed

    @staticmethod
    def new_ticket_ping(admin_role_id: int, owner_id: int) -> str:
        return f"<@&{admin_role_id}> new order from <@{owner_id}>"

    @staticmethod
    def delivery(order: Order, payload: str) -> str:
        body = payload or "An admin will send your product here shortly."
        return (
            f"✅ <@{order.buyer_id}> payment for order `{order.id}` confirmed!\n\n"
            f"📦 **{order.product_name}**\n{body}"
        )

    @staticmethod
    def format_order(order: Order) -> str:
        status_emoji = {
            OrderStatus.PENDING: "⏳",
            OrderStatus.PAID: "✅",
        }
        text = (
            f"{status_emoji[order.status]} `{order.id}` — {order.product_name} "
            f"{format_price(order.price)} — <@{order.buyer_id}> — {format_datetime(order.created_at)}"
        )
        if order.paid_at:
            text += f" (paid {format_datetime(order.paid_at)})"
        return text

    @staticmethod
    def order_list(orders: List[Order]) -> str:
        if not orders:
            return "📭 No orders found."
        # Most recent first, bounded by Discord's 2000-character limit
        lines = [Messages.format_order(o) for o in reversed(orders)]
        return truncate("\n".join(lines), 1900)

    @staticmethod
    def pix_settings(pix: PixSettings) -> str:
        return (
            f"• Key: `{pix.key or '-'}`\n"
            f"• Name: {pix.name or '-'}\n"
            f"• City: {pix.city or '-'}\n"
            f"• QR: {'OK' if pix.qr_url else 'Not set'}"
        )

    @staticmethod
    def payment_signaled(admin_role_id: int) -> str:
        return f"✅ Payment signaled! <@&{admin_role_id}> please verify it and complete the delivery."

    @staticmethod
    def closing(delay: float) -> str:
        return f"🔒 Closing ticket in {delay:g} seconds..."

    @staticmethod
    def help() -> discord.Embed:
        embed = discord.Embed(title="🛍 How this store works")
        embed.add_field(
            name="Customers",
            value=(
                "1. Press **Buy** on the store panel and pick a product.\n"
                "2. Review your cart and press **Checkout**, then **Confirm**.\n"
                "3. Pay with the PIX details posted in your private ticket.\n"
                "4. Press **I've paid** and wait for an admin.\n"
                "You can also use `/buy name:...` for a single product."
            ),
            inline=False
        )
        embed.add_field(
            name="Admins",
            value=(
                "`/panel` posts the store panel in this channel.\n"
                "`/pix set` configures where payments go.\n"
                "`/product add|list|remove` manages this channel's products.\n"
                "`/orders` lists orders and `/confirm` marks one as paid."
            ),
            inline=False
        )
        return embed
