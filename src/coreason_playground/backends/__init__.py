from .local import LocalBackend
from .remote import RemoteBackend

__all__ = ["LocalBackend", "RemoteBackend"]
