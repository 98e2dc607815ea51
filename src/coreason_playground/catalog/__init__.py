from .base import ExampleCatalogClient
from .local import LocalExampleCatalog
from .remote import RemoteExampleCatalog

__all__ = ["ExampleCatalogClient", "LocalExampleCatalog", "RemoteExampleCatalog"]
