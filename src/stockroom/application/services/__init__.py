from stockroom.application.services.authentication_service import (
    AccessToken,
    AuthenticationService,
)
from stockroom.application.services.product_catalog_service import (
    ProductCatalogService,
)
from stockroom.application.services.user_directory_service import (
    UserDirectoryService,
)

__all__ = [
    "AccessToken",
    "AuthenticationService",
    "ProductCatalogService",
    "UserDirectoryService",
]
