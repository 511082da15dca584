"""
Pydantic response models shared across the Wikipedia Agent.
"""

from __future__ import annotations

from pydantic import BaseModel

from config.settings import SERVICE_NAME


class HealthStatus(BaseModel):
    """Body of ``/health``."""

    status: str = "ok"


class VersionInfo(BaseModel):
    """Body of ``/version``."""

    name: str = SERVICE_NAME
    version: str
