"""
Common/shared schemas used across the application.
"""
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    service: str
    database: str


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope shared by every JSON endpoint"""
    success: bool = True
    data: T


class MessageResponse(BaseModel):
    """Success envelope for operations without a payload (e.g. deletes)"""
    success: bool = True
    message: str
