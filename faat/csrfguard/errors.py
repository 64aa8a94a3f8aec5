class CSRFError(Exception):
    pass


class SessionUnavailableError(CSRFError):
    pass


class TokenGenerationError(CSRFError):
    pass


class ConfigurationError(CSRFError):
    pass
