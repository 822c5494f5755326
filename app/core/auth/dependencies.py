from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import logging

from app.core.auth.service import IdentityVerifier, get_identity_verifier
from app.core.auth.schemas import AuthenticatedUser

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "unauthorized access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "forbidden access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: IdentityVerifier = Depends(get_identity_verifier)
) -> AuthenticatedUser:
    """Bearer-token gate: 401 without a token, 403 when the identity provider rejects it"""

    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    if not verifier.configured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication service is not configured"
        )

    claims = await verifier.verify_token(credentials.credentials)
    if claims is None:
        logger.warning(f"Rejected bearer token on {request.method} {request.url.path}")
        raise AuthorizationError()

    request.state.decoded = claims
    return AuthenticatedUser.from_claims(claims)
