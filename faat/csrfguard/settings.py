from starlette.config import Config
from starlette.datastructures import CommaSeparatedStrings, Secret

config = Config(".env")

CSRF_IGNORED_METHODS = config("CSRF_IGNORED_METHODS", cast=CommaSeparatedStrings, default="GET,HEAD,OPTIONS")
CSRF_TOKEN_HEADER = config("CSRF_TOKEN_HEADER", default="csrf-token")

# Only the demo app reads these. It refuses to start without a session key.
DEBUG = config("DEBUG", cast=bool, default=False)
SESSION_SECRET_KEY = config("SESSION_SECRET_KEY", cast=Secret, default=None)
SESSION_HTTPS_ONLY = config("SESSION_HTTPS_ONLY", cast=bool, default=True)
