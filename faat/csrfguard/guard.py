import inspect
import logging

from starlette.responses import PlainTextResponse

from .errors import CSRFError
from .extraction import retrieve_token as default_retrieve_token
from .sessionsecret import secret_for, session_from_request
from .tokens import create_salt, generate_token, is_valid_token

log = logging.getLogger(__name__)

DEFAULT_IGNORED_METHODS = frozenset(["GET", "HEAD", "OPTIONS"])
REJECT_STATUS = 403
REJECT_MESSAGE = "Invalid CSRF token"


class CSRFGuard:
    """Decides whether a request carries a token derived from its session's CSRF secret.

    Requests without a session are let through. This keeps apps without
    SessionMiddleware working, but it also means such apps get no protection,
    so install SessionMiddleware in front of the guard.
    """

    def __init__(self, ignored_methods=DEFAULT_IGNORED_METHODS, retrieve_token=None, logger=None):
        self._ignored_methods = frozenset(m.upper() for m in ignored_methods)
        self._retrieve_token = retrieve_token or default_retrieve_token
        self._log = logger or log

    @property
    def ignored_methods(self):
        return self._ignored_methods

    async def check(self, request):
        session = session_from_request(request)
        if session is None:
            self._log.error("Failed to check CSRF token - no session")
            return True

        try:
            secret = secret_for(session)
        except (NotImplementedError, OSError):
            self._log.exception("Failed to check CSRF token - cannot create the session secret")
            return False

        if request.method.upper() in self._ignored_methods:
            return True

        try:
            token = self._retrieve_token(request)
            if inspect.isawaitable(token):
                token = await token
        except Exception:
            self._log.exception(f"Failed to read CSRF token on {request.method} {request.url.path}")
            return False
        if token is None:
            self._log.debug(f"No CSRF token on {request.method} {request.url.path}")
            return False

        try:
            valid = is_valid_token(secret, token)
        except CSRFError:
            self._log.exception("Failed to check CSRF token")
            return False

        if not valid:
            self._log.debug(f"Invalid CSRF token on {request.method} {request.url.path}")
        return valid

    def create_token(self, request):
        session = session_from_request(request)
        if session is None:
            self._log.error("Failed to create CSRF token - no session")
            return None

        try:
            secret = secret_for(session)
            return generate_token(secret, create_salt())
        except (CSRFError, NotImplementedError, OSError):
            self._log.exception("Failed to create CSRF token")
            return None

    def reject_response(self):
        return PlainTextResponse(REJECT_MESSAGE, REJECT_STATUS)
