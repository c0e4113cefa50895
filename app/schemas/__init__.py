from .account import *
from .site_config import *
from .project import *
from .product import *
from .message import *

__all__ = [
    # Account
    "AccountCreate", "AccountResponse",

    # Site config
    "SiteConfigUpdate", "SiteConfigResponse",

    # Project
    "ProjectBase", "ProjectCreate", "ProjectUpdate", "ProjectResponse",

    # Product
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse",

    # Message
    "MessageBase", "MessageCreate", "MessageResponse",
    "MessageReplyCreate", "MessageReplyResponse",
]
