from pathlib import Path

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route
from starlette.templating import Jinja2Templates

from . import settings
from .errors import ConfigurationError
from .extraction import TOKEN_FIELD, header_extractor
from .guard import CSRFGuard
from .middleware import CSRFMiddleware, create_token

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

CUSTOM_TOKEN_HEADER = "lalala-token"


async def get_form(request):
    token = create_token(request)
    return templates.TemplateResponse(request, "form.html", {"csrf_field": TOKEN_FIELD, "csrf_token": token})


async def post_form(request):
    async with request.form() as form:
        name = form.get("name") or "anonymous"
    return PlainTextResponse(f"Hello, {name}")


def token_endpoint(header):
    async def endpoint(request):
        headers = {}
        if request.method == "GET":
            token = create_token(request)
            if token:
                headers[header] = token
        return Response(status_code=204, headers=headers)

    return endpoint


def create_app(session_secret_key=None, https_only=None, debug=None):
    """Builds the demo app.

    Run it with an ASGI server in factory mode, e.g. `uvicorn --factory faat.csrfguard.web:create_app`.
    """
    if session_secret_key is None:
        if settings.SESSION_SECRET_KEY is None:
            raise ConfigurationError("SESSION_SECRET_KEY is required")
        session_secret_key = str(settings.SESSION_SECRET_KEY)
    if https_only is None:
        https_only = settings.SESSION_HTTPS_ONLY
    if debug is None:
        debug = settings.DEBUG

    default_guard = CSRFGuard(ignored_methods=list(settings.CSRF_IGNORED_METHODS))
    custom_guard = CSRFGuard(retrieve_token=header_extractor(CUSTOM_TOKEN_HEADER))
    strict_guard = CSRFGuard(ignored_methods=[], retrieve_token=header_extractor(CUSTOM_TOKEN_HEADER))

    def guarded(guard):
        return [Middleware(CSRFMiddleware, guard=guard)]

    return Starlette(
        debug=debug,
        middleware=[
            Middleware(SessionMiddleware, secret_key=session_secret_key, https_only=https_only),
        ],
        routes=[
            Route("/form", get_form, methods=["GET"], middleware=guarded(default_guard)),
            Route("/form", post_form, methods=["POST"], middleware=guarded(default_guard)),
            Route(
                "/qwer",
                token_endpoint(settings.CSRF_TOKEN_HEADER),
                methods=["GET", "POST"],
                middleware=guarded(default_guard),
            ),
            Route(
                "/zxcv",
                token_endpoint(CUSTOM_TOKEN_HEADER),
                methods=["GET", "POST"],
                middleware=guarded(custom_guard),
            ),
            Route(
                "/asdf",
                token_endpoint(settings.CSRF_TOKEN_HEADER),
                methods=["GET", "POST"],
                middleware=guarded(strict_guard),
            ),
        ],
    )

