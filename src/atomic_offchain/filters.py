"""
Asset Filter Parameters

Translation of field/value filters into explorer data-filter query
parameters (``data:<type>.<field>``).
"""

from typing import Mapping


FilterValue = bool | int | float | str
QueryValue = int | float | str


def filter_param_key(field: str, value: FilterValue) -> str:
    """
    Build the typed query parameter key for a field filter

    Booleans map to ``bool``, numbers to ``number`` and everything else to
    ``text``. ``bool`` is tested first since it subclasses ``int``.

    Example:
        >>> filter_param_key("year", 2020)
        'data:number.year'
    """
    if isinstance(value, bool):
        return f"data:bool.{field}"
    if isinstance(value, (int, float)):
        return f"data:number.{field}"
    return f"data:text.{field}"


def build_filter_params(field_filters: Mapping[str, FilterValue] | None = None) -> dict[str, QueryValue]:
    """
    Build explorer query parameters from field filters

    Args:
        field_filters: Field name to filter value

    Returns:
        One ``data:<type>.<field>`` parameter per filter. Booleans are
        serialized as ``"true"``/``"false"``; other values pass through.

    Example:
        >>> build_filter_params({"minted": True, "year": 2020, "city": "Lima"})
        {'data:bool.minted': 'true', 'data:number.year': 2020, 'data:text.city': 'Lima'}
    """
    params: dict[str, QueryValue] = {}
    for field, value in (field_filters or {}).items():
        if isinstance(value, bool):
            params[filter_param_key(field, value)] = "true" if value else "false"
        else:
            params[filter_param_key(field, value)] = value
    return params


def build_nation_params(
    nation_code: str = "", field_filters: Mapping[str, FilterValue] | None = None
) -> dict[str, QueryValue]:
    """
    Build query parameters for a nation-code filter plus generic filters

    The ``data:text.nation`` parameter is set to the upper-cased code when
    one is given. Generic filters are merged afterwards, so a ``nation``
    entry in ``field_filters`` replaces it.
    """
    params: dict[str, QueryValue] = {}
    if nation_code:
        params["data:text.nation"] = nation_code.upper()
    params.update(build_filter_params(field_filters))
    return params
