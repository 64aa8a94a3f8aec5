import hashlib
import hmac
import secrets

from .errors import TokenGenerationError

SEPARATOR = "-"
SALT_BYTES = 8


def create_salt(nbytes=SALT_BYTES):
    try:
        return secrets.token_bytes(nbytes).hex()
    except (NotImplementedError, OSError) as e:
        raise TokenGenerationError("Random source is unavailable") from e


def generate_token(secret, salt):
    """Returns the token for a salt, in the form ``<salt>-<md5 hex digest>``.

    The digest covers ``salt + "-" + secret`` so the same pair always yields the same token.
    """
    try:
        h = hashlib.md5(usedforsecurity=False)
    except ValueError as e:
        raise TokenGenerationError("md5 digest is unavailable") from e
    h.update(f"{salt}{SEPARATOR}{secret}".encode())
    return f"{salt}{SEPARATOR}{h.hexdigest()}"


def is_valid_token(secret, token):
    if not isinstance(token, str) or SEPARATOR not in token:
        return False

    salt = token.split(SEPARATOR, 1)[0]
    if not salt:
        return False

    expected = generate_token(secret, salt)
    return hmac.compare_digest(expected.encode(), token.encode())
