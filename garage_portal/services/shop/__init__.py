"""
Shop data and screen queries.
"""

from .data import ShopDataProvider
from .service import ShopService

__all__ = ["ShopDataProvider", "ShopService"]
