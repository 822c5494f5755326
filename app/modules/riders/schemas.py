# app/modules/riders/schemas.py
from typing import Optional

from app.shared.schemas.common import OpenDocument


class RiderApplicationRequest(OpenDocument):
    """Rider application; the applicant's profile fields are stored as sent"""
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[str] = None
