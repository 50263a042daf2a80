from flask import make_response, request


class BadRequest(Exception):
    """Client input that a handler cannot act on; answered with 400."""


def plain_error(message: str, status: int):
    response = make_response(message + '\n', status)
    response.mimetype = 'text/plain'
    return response


def query_username() -> str:
    username = request.args.get('username', '')
    if not username:
        raise BadRequest('Username is required')
    return username


def body_field(name: str) -> str:
    """Required non-empty string field from a JSON object body."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise BadRequest('Invalid request payload')
    value = data.get(name)
    if not isinstance(value, str) or not value:
        raise BadRequest('Invalid request payload')
    return value
