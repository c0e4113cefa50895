from .site_config import router as site_config_router
from .projects import router as projects_router
from .products import router as products_router
from .messages import router as messages_router
from .uploads import router as uploads_router

__all__ = [
    "site_config_router", "projects_router", "products_router",
    "messages_router", "uploads_router"
]
