# app/shared/schemas/common.py
from pydantic import BaseModel
from typing import Any, Dict


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class InsertOneResponse(BaseModel):
    """Result of a single-document insert, shaped like the driver's result"""
    acknowledged: bool
    insertedId: str

    @classmethod
    def from_result(cls, result) -> "InsertOneResponse":
        return cls(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))


class DeleteOneResponse(BaseModel):
    acknowledged: bool
    deletedCount: int

    @classmethod
    def from_result(cls, result) -> "DeleteOneResponse":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)


class OpenDocument(BaseModel):
    """Client-supplied document with no enforced schema"""

    class Config:
        extra = "allow"

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump(exclude_unset=True)
        # Identifiers are always assigned by the store
        document.pop("_id", None)
        return document


class HealthResponse(BaseModel):
    status: str
    version: str
    app: str
    environment: str
    integrations: Dict[str, bool]
