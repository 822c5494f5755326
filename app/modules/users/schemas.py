# app/modules/users/schemas.py
from typing import Optional

from app.shared.schemas.common import OpenDocument


class UserProfileRequest(OpenDocument):
    email: Optional[str] = None
    role: Optional[str] = None
