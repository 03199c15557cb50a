"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from paycheck_insights.config import Settings, settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide service configuration (overridable in tests)"""
    return settings
