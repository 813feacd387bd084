from .correlation import CorrelationIdMiddleware
from .errors import UnhandledErrorMiddleware

__all__ = ["CorrelationIdMiddleware", "UnhandledErrorMiddleware"]
