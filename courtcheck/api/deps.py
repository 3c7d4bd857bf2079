from datetime import date

from fastapi import Request

from courtcheck.services.registry import ResourceRegistry


def get_registry(request: Request) -> ResourceRegistry:
    """Registry loaded once in the app lifespan; shared read-only by every request."""
    return request.app.state.registry


def get_today() -> date:
    """Local calendar date used by the past-date rule. Overridden in tests."""
    return date.today()
