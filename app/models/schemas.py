"""Pydantic schemas for request/response validation"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional
from datetime import datetime
from app.db.models.user import FIRSTNAME_MAX_LENGTH, LASTNAME_MAX_LENGTH


class UserCreate(BaseModel):
    """Input schema for creating a user"""
    firstname: str = Field(
        ...,
        min_length=1,
        max_length=FIRSTNAME_MAX_LENGTH,
        description="First name, unique across users",
        examples=["John"]
    )
    lastname: str = Field(
        ...,
        min_length=1,
        max_length=LASTNAME_MAX_LENGTH,
        description="Last name, unique across users",
        examples=["Doe"]
    )


class UserUpdate(BaseModel):
    """
    Partial update. Fields left out of the request body keep their stored
    value; sending ``null`` is rejected since both columns are required.
    """
    firstname: Optional[str] = Field(None, min_length=1, max_length=FIRSTNAME_MAX_LENGTH, examples=["John Updated"])
    lastname: Optional[str] = Field(None, min_length=1, max_length=LASTNAME_MAX_LENGTH)

    @field_validator("firstname", "lastname")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field may be omitted but not set to null")
        return v


class UserRead(BaseModel):
    """Output schema for a stored user"""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Identifier assigned by storage")
    firstname: str
    lastname: str


class HealthCheck(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    database_connected: bool = Field(..., description="Whether the database answered a ping")
    version: str = Field(..., description="API version")


class ErrorResponse(BaseModel):
    """Error response schema"""
    error: str = Field(..., description="Error type")
    detail: Any = Field(..., description="Error details")
    path: str = Field(..., description="Request path")
