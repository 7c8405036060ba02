# marksportal/utils/params.py
from flask import request

from marksportal.errors import MarksPortalError, MissingParameters

# the original front end sends the academic year as ?year=
PARAM_ALIASES = {"academic_year": ("year",)}


def query_param(name):
    value = request.args.get(name, "").strip()
    if value:
        return value
    for alias in PARAM_ALIASES.get(name, ()):
        value = request.args.get(alias, "").strip()
        if value:
            return value
    return None


def require_query_params(*names, message=None):
    """Return the named query parameters in order, or raise MissingParameters."""
    values = [query_param(n) for n in names]
    missing = [n for n, v in zip(names, values) if v is None]
    if missing:
        raise MissingParameters(missing, message)
    return values


def json_body():
    """The request's JSON object; an empty or unparsable body counts as ``{}``."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MarksPortalError("Request body must be a JSON object")
    return data
