from .account import Account
from .site_config import SiteConfig
from .project import Project
from .product import Product
from .message import Message, MessageReply

__all__ = [
    "Account", "SiteConfig", "Project", "Product", "Message", "MessageReply"
]
