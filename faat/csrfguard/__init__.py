from .errors import ConfigurationError, CSRFError, SessionUnavailableError, TokenGenerationError
from .extraction import TOKEN_FIELD, TOKEN_HEADERS, header_extractor, retrieve_token
from .guard import DEFAULT_IGNORED_METHODS, CSRFGuard
from .middleware import CSRFMiddleware, create_token
from .sessionsecret import SECRET_KEY, secret_for
from .tokens import create_salt, generate_token, is_valid_token

__version__ = "0.1.0"
