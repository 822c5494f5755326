import base64
import json
import logging
from typing import Any, Dict, Optional

import cachecontrol
import google.auth.transport.requests
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import id_token, service_account
from starlette.concurrency import run_in_threadpool

from app.config.settings import settings

logger = logging.getLogger(__name__)

FIREBASE_ISSUER = "https://securetoken.google.com/{project_id}"


def cached_transport_request() -> google.auth.transport.requests.Request:
    """Transport whose session honors Cache-Control on Google's certificate responses"""
    session = cachecontrol.CacheControl(requests.Session())
    return google.auth.transport.requests.Request(session=session)


class IdentityVerifier:
    """Verifies Firebase Authentication ID tokens against Google's public certificates"""

    def __init__(self, service_key: Optional[str] = None):
        self.project_id: Optional[str] = None
        self.configured = False
        self._request = None

        if not service_key:
            logger.warning("⚠️ Identity provider credentials missing, auth-gated routes disabled")
            return

        try:
            info = json.loads(base64.b64decode(service_key).decode("utf-8"))
            if not isinstance(info, dict):
                raise ValueError("service account blob is not a JSON object")

            credentials = service_account.Credentials.from_service_account_info(info)
            self.project_id = credentials.project_id or info.get("project_id")
            if not self.project_id:
                raise ValueError("service account has no project_id")

            self._request = cached_transport_request()
            self.configured = True
            logger.info(f"✅ Identity provider configured for project {self.project_id}")

        except (ValueError, TypeError) as e:
            logger.error(f"❌ Error configuring identity provider: {e}")
            self.configured = False

    def _verify(self, token: str) -> Dict[str, Any]:
        claims = id_token.verify_firebase_token(token, self._request, audience=self.project_id)
        if claims.get("iss") != FIREBASE_ISSUER.format(project_id=self.project_id):
            raise ValueError(f"Token has wrong issuer: {claims.get('iss')}")
        if not claims.get("sub"):
            raise ValueError("Token has no subject")
        return claims

    async def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode a token, None when invalid or expired"""
        try:
            return await run_in_threadpool(self._verify, token)
        except (ValueError, GoogleAuthError) as e:
            logger.info(f"Token rejected: {e}")
            return None


# ==================== SERVICE INSTANCE ====================

identity_verifier = IdentityVerifier(settings.fb_service_key)


def get_identity_verifier() -> IdentityVerifier:
    return identity_verifier
