"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Request
from bloodbank_gateway.config import Settings, settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_today() -> date:
    """Provide the reference date for eligibility checks (overridable in tests)"""
    return date.today()
