# app/modules/riders/__init__.py
"""Riders module - delivery-rider applications"""

from .router import router
from .service import RidersService
from .repository import RidersRepository

__all__ = [
    "router",
    "RidersService",
    "RidersRepository"
]
