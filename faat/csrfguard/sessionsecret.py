import uuid

from .errors import SessionUnavailableError

SECRET_KEY = "CSRFSecret"


def session_from_request(request):
    # request.session asserts when SessionMiddleware is missing
    if "session" not in request.scope:
        return None
    return request.session


def secret_for(session):
    if session is None:
        raise SessionUnavailableError("No session to hold the CSRF secret")

    secret = session.get(SECRET_KEY)
    if secret is None:
        secret = str(uuid.uuid4())
        session[SECRET_KEY] = secret
    return str(secret)
