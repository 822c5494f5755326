# app/modules/users/__init__.py
"""Users module - user profiles"""

from .router import router
from .service import UsersService
from .repository import UsersRepository

__all__ = [
    "router",
    "UsersService",
    "UsersRepository"
]
