from stockroom.presentation.api.routers.auth import router as auth_router
from stockroom.presentation.api.routers.products import router as products_router
from stockroom.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "products_router",
    "users_router",
]
