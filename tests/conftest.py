import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.main import app
from app.config.database import get_db
from app.core.auth.service import get_identity_verifier
from app.shared.services.cloudinary_service import CloudinaryService, get_image_store
from app.shared.services.stripe_service import StripeService, get_payment_gateway


VALID_TOKEN = "valid-token"
VALID_CLAIMS = {
    "iss": "https://securetoken.google.com/hurayra-test",
    "aud": "hurayra-test",
    "sub": "uid-123",
    "user_id": "uid-123",
    "email": "owner@example.com",
    "email_verified": True,
}


# ==================== IN-MEMORY DOCUMENT STORE ====================

def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    def sort(self, key: str, direction: int) -> "FakeCursor":
        present = [d for d in self._documents if d.get(key) is not None]
        missing = [d for d in self._documents if d.get(key) is None]
        present.sort(key=lambda d: d[key], reverse=direction < 0)
        self._documents = present + missing
        return self

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """Subset of AsyncCollection used by the repositories"""

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []
        self.failures: Dict[str, Exception] = {}

    def _maybe_fail(self, operation: str):
        if operation in self.failures:
            raise self.failures.pop(operation)

    async def insert_one(self, document: Dict[str, Any]):
        self._maybe_fail("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(acknowledged=True, inserted_id=document["_id"])

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        self._maybe_fail("find")
        query = query or {}
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def find_one(self, query: Dict[str, Any]):
        self._maybe_fail("find_one")
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def delete_one(self, query: Dict[str, Any]):
        self._maybe_fail("delete_one")
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(acknowledged=True, deleted_count=1)
        return SimpleNamespace(acknowledged=True, deleted_count=0)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]):
        self._maybe_fail("update_one")
        for document in self.documents:
            if _matches(document, query):
                changes = update.get("$set", {})
                modified = any(document.get(k) != v for k, v in changes.items())
                document.update(changes)
                return SimpleNamespace(
                    acknowledged=True, matched_count=1, modified_count=1 if modified else 0
                )
        return SimpleNamespace(acknowledged=True, matched_count=0, modified_count=0)


class FakeDatabase:
    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


# ==================== EXTERNAL SERVICE DOUBLES ====================

class FakeVerifier:
    def __init__(self, configured: bool = True):
        self.configured = configured
        self.calls: List[str] = []

    async def verify_token(self, token: str):
        self.calls.append(token)
        return dict(VALID_CLAIMS) if token == VALID_TOKEN else None


class FakePaymentIntents:
    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(id="pi_test_123", client_secret="pi_test_123_secret_abc")


class FakeStripe:
    def __init__(self):
        self.PaymentIntent = FakePaymentIntents()


# ==================== FIXTURES ====================

@pytest.fixture()
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture()
def verifier() -> FakeVerifier:
    return FakeVerifier()


@pytest.fixture()
def fake_stripe() -> FakeStripe:
    return FakeStripe()


@pytest.fixture()
def gateway(fake_stripe) -> StripeService:
    return StripeService(secret_key="sk_test_123", stripe_client=fake_stripe)


@pytest.fixture()
def image_store(monkeypatch) -> CloudinaryService:
    store = CloudinaryService()
    store.configured = True
    uploads: List[bytes] = []

    def fake_upload(file_content, **options):
        uploads.append(file_content)
        return {
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/v1/{options['public_id']}.png",
            "bytes": len(file_content),
        }

    monkeypatch.setattr("cloudinary.uploader.upload", fake_upload)
    store.uploads = uploads
    return store


@pytest.fixture()
def client(fake_db, verifier, gateway, image_store):
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_identity_verifier] = lambda: verifier
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    app.dependency_overrides[get_image_store] = lambda: image_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
