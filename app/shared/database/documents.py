# app/shared/database/documents.py
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a 24-hex identifier, None when malformed"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def require_object_id(value: str, label: str = "id") -> ObjectId:
    object_id = to_object_id(value)
    if object_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label}"
        )
    return object_id


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Render ObjectId values as strings and datetimes as ISO-8601"""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]
