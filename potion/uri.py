from uritemplate import URITemplate

from .exceptions import MissingParameterError

# simple and reserved expansions cannot be left out of a path
REQUIRED_OPERATORS = ('', '+')


def _operator(variable):
    return getattr(variable.operator, 'value', variable.operator)


def variables(template):
    """
    Returns the names of all variables in ``template`` in the order they appear.
    """
    names = []
    for variable in URITemplate(template).variables:
        for name in variable.variable_names:
            if name not in names:
                names.append(name)
    return names


def required_variables(template):
    names = []
    for variable in URITemplate(template).variables:
        if _operator(variable) in REQUIRED_OPERATORS:
            for name in variable.variable_names:
                if name not in names:
                    names.append(name)
    return names


def _prepare(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    if isinstance(value, dict):
        return {key: _prepare(item) for key, item in value.items()}
    if isinstance(value, str):
        return value
    return str(value)


def expand(template, params):
    """
    Expands a URI template following RFC 6570.

    Simple ``{name}`` and reserved ``{+name}`` expressions must have a value in ``params``; operator expressions
    such as ``{/member}`` or ``{?page,per_page}`` drop any variable that has no value.

    :param str template: a URI template
    :param dict params: variable values; unused values are ignored
    :raises MissingParameterError: if a required variable has no value
    :return: the expanded URI
    """
    params = params or {}

    for name in required_variables(template):
        if params.get(name) is None:
            raise MissingParameterError(name, template)

    values = {name: _prepare(value) for name, value in params.items() if value is not None}
    return URITemplate(template).expand(values)
