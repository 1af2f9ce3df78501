"""Errors raised by the store services.

Every error carries the message shown to the user who triggered it, so
handlers can answer with ``str(error)`` without leaking internals.
"""


class ShopError(Exception):
    """Base class for user-facing store errors"""

    default_message = "❌ Something went wrong."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


# Validation

class ShopValidationError(ShopError, ValueError):
    default_message = "❌ Invalid input."


class ProductNotFoundError(ShopValidationError):
    default_message = "❌ Product not found in this channel."


class OrderNotFoundError(ShopValidationError):
    default_message = "❌ Order not found."


class InvalidActionError(ShopValidationError):
    default_message = "⚠️ Invalid action."


# Authorization

class ShopAuthorizationError(ShopError, PermissionError):
    default_message = "⛔️ You are not allowed to do that."


class AdminOnlyError(ShopAuthorizationError):
    default_message = "⛔️ Only admins can use this."


class NotForYouError(ShopAuthorizationError):
    default_message = "❌ This is not for you."


class WrongChannelError(ShopAuthorizationError):
    default_message = "❌ This belongs to another channel."


# Preconditions

class ShopPreconditionError(ShopError):
    pass


class PixNotConfiguredError(ShopPreconditionError):
    default_message = "❌ PIX not configured. An admin must use `/pix set`."


class EmptyCartError(ShopPreconditionError):
    default_message = "🛒 Your cart is empty."


class TicketCategoryMissingError(ShopPreconditionError):
    default_message = "❌ The ticket category is not configured correctly (SALES_CATEGORY_ID)."


class OrderAlreadyPaidError(ShopPreconditionError):
    default_message = "ℹ️ This order is already paid."


# External dependencies

class TicketChannelError(ShopError):
    default_message = "❌ Could not create your ticket channel. Please try again later."
