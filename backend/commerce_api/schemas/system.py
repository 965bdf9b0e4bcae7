"""System Schemas — root banner and health payloads."""

from pydantic import BaseModel


class RootResponse(BaseModel):
    message: str
    version: str
    docs: str | None = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    version: str
