from .gameplay import get_gameplay_service_dep

__all__ = ["get_gameplay_service_dep"]
