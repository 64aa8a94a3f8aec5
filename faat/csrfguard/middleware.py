import logging

from starlette.middleware.base import BaseHTTPMiddleware

from . import settings
from .guard import CSRFGuard

log = logging.getLogger(__name__)


class CSRFMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, guard=None, **guard_options):
        super().__init__(app)
        if guard is None:
            guard_options.setdefault("ignored_methods", list(settings.CSRF_IGNORED_METHODS))
            guard = CSRFGuard(**guard_options)
        self.guard = guard

    async def dispatch(self, request, call_next):
        request.state.csrf_guard = self.guard
        if not await self.guard.check(request):
            return self.guard.reject_response()
        response = await call_next(request)
        return response


def create_token(request):
    guard = getattr(request.state, "csrf_guard", None)
    if guard is None:
        log.error("Failed to create CSRF token - CSRFMiddleware is not installed")
        return None
    return guard.create_token(request)
