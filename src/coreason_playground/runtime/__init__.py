from .loader import RuntimeHost, RuntimeLoader
from .readiness import Readiness

__all__ = ["Readiness", "RuntimeHost", "RuntimeLoader"]
