import logging

import httpx

from .extraction import TOKEN_HEADERS

log = logging.getLogger(__name__)

SAFE_METHODS = ("GET", "HEAD", "OPTIONS")


class CSRFTokenAuth(httpx.Auth):
    """Sends back the latest CSRF token the server issued.

    The server is expected to return tokens in a response header. The token is
    added to every request whose method is not in `safe_methods`.
    """

    def __init__(self, header=TOKEN_HEADERS[0], safe_methods=SAFE_METHODS):
        self.header = header
        self.safe_methods = tuple(m.upper() for m in safe_methods)
        self.token = None

    def auth_flow(self, request):
        if self.token and request.method.upper() not in self.safe_methods:
            request.headers[self.header] = self.token
        response = yield request
        token = response.headers.get(self.header)
        if token:
            log.debug(f"Received CSRF token from {request.url}")
            self.token = token
