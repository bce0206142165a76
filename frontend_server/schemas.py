"""
Pydantic schemas for the JSON endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ConfigResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    backend_url: str = Field(..., alias="backendUrl")


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    backend_url: str = Field(..., alias="backendUrl")


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
