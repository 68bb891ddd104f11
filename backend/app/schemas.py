from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SmartFeedbackRequest(BaseModel):
    # goalText is optional here so that a missing goal becomes a 400 from the
    # resolver rather than a 422 from validation.
    model_config = ConfigDict(populate_by_name=True)

    goal_text: str | None = Field(None, alias="goalText")
    api_key: str | None = Field(None, alias="apiKey")
    user_id: str | None = Field(None, alias="userId")
    context: str | dict[str, Any] | None = None


class SmartFeedbackResponse(BaseModel):
    feedback: str
    provider: str
    timestamp: datetime
    error: str | None = None


class ValidateKeyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(None, alias="userId")
    api_key: str | None = Field(None, alias="apiKey")


class ValidateKeyResponse(BaseModel):
    valid: bool
    error: str | None = None


class StoredKeyUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey", min_length=1)


class StoredKeyResponse(BaseModel):
    user_id: str = Field(..., serialization_alias="userId")
    has_key: bool = Field(..., serialization_alias="hasKey")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")
