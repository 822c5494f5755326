from pydantic import BaseModel
from typing import Any, Dict, Optional


class AuthenticatedUser(BaseModel):
    uid: str
    email: Optional[str] = None
    email_verified: bool = False
    claims: Dict[str, Any] = {}

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "AuthenticatedUser":
        return cls(
            uid=claims.get("user_id") or claims["sub"],
            email=claims.get("email"),
            email_verified=bool(claims.get("email_verified", False)),
            claims=claims,
        )
