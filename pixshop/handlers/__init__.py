"""Interaction handlers"""
from .admin_handlers import AdminHandler
from .base_handler import BaseHandler
from .callback_handler import CallbackHandler
from .ticket_channels import DiscordTicketChannels
from .user_handlers import UserHandler

__all__ = [
    'AdminHandler',
    'BaseHandler',
    'CallbackHandler',
    'DiscordTicketChannels',
    'UserHandler',
]
