TOKEN_FIELD = "_csrf"
TOKEN_HEADERS = ("csrf-token", "xsrf-token", "x-csrf-token", "x-xsrf-token")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def retrieve_token(request):
    """Finds the token a client sent back with the request.

    Looks at the url-encoded form body, then the query string, then the known headers,
    and returns the first value found or None.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";", 1)[0].strip().lower() == FORM_CONTENT_TYPE:
        # Buffer the body so handlers further down can read it again.
        await request.body()
        async with request.form() as form:
            token = form.get(TOKEN_FIELD)
        if token is not None:
            return token

    token = request.query_params.get(TOKEN_FIELD)
    if token is not None:
        return token

    for name in TOKEN_HEADERS:
        token = request.headers.get(name)
        if token is not None:
            return token

    return None


def header_extractor(name):
    def retrieve(request):
        return request.headers.get(name)

    return retrieve
