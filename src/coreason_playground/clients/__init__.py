from .remote import RemoteExecutionClient

__all__ = ["RemoteExecutionClient"]
