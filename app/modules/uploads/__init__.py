# app/modules/uploads/__init__.py
"""Uploads module - images hosted on Cloudinary"""

from .router import router

__all__ = ["router"]
