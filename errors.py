"""HTTP errors raised by the request handlers.

Each one is a werkzeug ``HTTPException`` so Flask picks the status code up
from the class; ``app.py`` renders all of them into the JSON envelope.
"""
from flask import request
from werkzeug.exceptions import BadRequest, Conflict, InternalServerError, NotFound, Unauthorized


class ValidationError(BadRequest):
    description = 'Missing required fields'


class AuthError(Unauthorized):
    description = 'Invalid email or password'


class NotFoundError(NotFound):
    description = 'Not found'


class ConflictError(Conflict):
    description = 'Already exists'


class InternalError(InternalServerError):
    description = 'Internal server error'


def json_body():
    """Request JSON as a dict; anything that is not a JSON object counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
