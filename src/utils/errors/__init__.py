from .exceptions import IdMapStoreError, InfrastructureError

__all__ = ["IdMapStoreError", "InfrastructureError"]
