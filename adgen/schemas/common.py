"""
Common schemas used across the API
"""
from typing import Optional, Any
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response"""
    success: bool = False
    error: str
    detail: Optional[Any] = None


class HealthResponse(BaseModel):
    """Service liveness"""
    status: str
    app: str
    version: str
    environment: str


class DatabaseHealthResponse(BaseModel):
    """Database reachability; ``error`` is only set when unhealthy"""
    status: str
    database: str
    dialect: Optional[str] = None
    error: Optional[str] = None
