# pixshop/utils/tokens.py
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict
from .errors import InvalidActionError, NotForYouError, WrongChannelError

SEPARATOR = ":"

class Action(str, Enum):
    # Storefront panel, shared by everyone
    OPEN_MENU = "open_menu"
    VIEW_CART = "view_cart"
    # Cart, bound to one customer in one channel
    ADD_TO_CART = "add_to_cart"
    ADD_MORE = "add_more"
    CLEAR_CART = "clear_cart"
    CHECKOUT = "checkout"
    CONFIRM_ORDER = "confirm_order"
    CANCEL_ORDER = "cancel_order"
    # Ticket, bound to its owner
    PAID = "paid"
    CLOSE = "close"

PANEL_ACTIONS = {Action.OPEN_MENU, Action.VIEW_CART}
TICKET_ACTIONS = {Action.PAID, Action.CLOSE}

class ActionToken(BaseModel):
    """Identity packed into a component custom id"""
    model_config = ConfigDict(frozen=True)

    action: Action
    owner_id: Optional[int] = None
    scope_id: Optional[int] = None

    def encode(self) -> str:
        parts = [self.action.value]
        if self.owner_id is not None:
            parts.append(str(self.owner_id))
            if self.scope_id is not None:
                parts.append(str(self.scope_id))
        return SEPARATOR.join(parts)

    @classmethod
    def decode(cls, custom_id: str) -> "ActionToken":
        parts = (custom_id or "").split(SEPARATOR)
        try:
            action = Action(parts[0])
            ids = [int(part) for part in parts[1:]]
        except ValueError:
            raise InvalidActionError() from None

        expected = 0 if action in PANEL_ACTIONS else 1 if action in TICKET_ACTIONS else 2
        if len(ids) != expected:
            raise InvalidActionError()
        return cls(
            action=action,
            owner_id=ids[0] if ids else None,
            scope_id=ids[1] if len(ids) > 1 else None,
        )

    def is_owner(self, actor_id: int) -> bool:
        return self.owner_id is None or self.owner_id == actor_id

    def authorize(self, actor_id: int, channel_id: Optional[int] = None):
        """Reject actors other than the embedded owner, or a foreign channel"""
        if not self.is_owner(actor_id):
            raise NotForYouError()
        if self.scope_id is not None and self.scope_id != channel_id:
            raise WrongChannelError()
