from jsonschema import Draft4Validator, FormatChecker

from .exceptions import InvalidLinkError

HTTP_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE')

LINK_DESCRIPTION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "properties": {
        "rel": {
            "type": "string",
            "minLength": 1
        },
        "href": {
            "type": "string",
            "minLength": 1
        },
        "method": {
            "type": "string",
            "enum": list(HTTP_METHODS)
        },
        "title": {"type": "string"},
        "description": {"type": "string"},
        "schema": {"type": "object"},
        "targetSchema": {"type": "object"}
    },
    "required": ["rel", "href"]
}

LINKS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "array",
    "items": LINK_DESCRIPTION_SCHEMA
}

HAL_LINK_SCHEMA = {
    "type": "object",
    "properties": {
        "href": {
            "type": "string",
            "minLength": 1
        },
        "method": {
            "type": "string",
            "enum": list(HTTP_METHODS)
        },
        "methods": {
            "type": "array",
            "items": {"type": "string", "enum": list(HTTP_METHODS)},
            "minItems": 1
        }
    },
    "required": ["href"]
}

HAL_LINKS_SCHEMA = {
    "$schema": "http://json-schema.org/draft-04/schema#",
    "type": "object",
    "additionalProperties": {
        "oneOf": [
            HAL_LINK_SCHEMA,
            {
                "type": "array",
                "items": HAL_LINK_SCHEMA,
                "minItems": 1
            }
        ]
    }
}

Draft4Validator.check_schema(LINKS_SCHEMA)
Draft4Validator.check_schema(HAL_LINKS_SCHEMA)

_links_validator = Draft4Validator(LINKS_SCHEMA, format_checker=FormatChecker())
_hal_links_validator = Draft4Validator(HAL_LINKS_SCHEMA, format_checker=FormatChecker())


def _validate(validator, instance):
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.absolute_path])
    if errors:
        raise InvalidLinkError(errors)
    return instance


def validate_links(links):
    """
    Validates a list of JSON hyper-schema link description objects, such as ``{"rel": "self", "href": "/user",
    "method": "GET"}``.

    :raises InvalidLinkError: if any link is malformed
    """
    return _validate(_links_validator, links)


def validate_hal_links(links):
    """
    Validates a ``_links`` object mapping relation names to ``{"href": ...}`` objects or
    non-empty arrays of them.

    :raises InvalidLinkError: if any link is malformed
    """
    return _validate(_hal_links_validator, links)
