"""Domain layer utilities."""

from dataclasses import MISSING, Field, fields, is_dataclass
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

D = TypeVar("D")


def dict_to_dataclass(dc_type: type[D], values: dict[str, Any]) -> D:
    """Rebuild a (possibly nested) dataclass instance from a plain dict.

    This is the inverse of `dataclasses.asdict` for the shapes used by domain
    events: every field is a primitive, another dataclass (typically a value
    object such as `EmailAddress`), or an optional dataclass (`X | None`).

    Args:
        dc_type: The dataclass type to build.
        values: The dict containing the data, e.g. an event payload.

    Returns:
        An instance of dc_type populated with data from values.

    Raises:
        TypeError: If dc_type is not a dataclass type, or if a
            dataclass-typed field holds something other than a
            dict, an instance of that dataclass, or None where `X | None`
            allows it.
        KeyError: If a required field is missing from values.

    Note:
        - Keys in values that are not fields of dc_type are ignored.
        - Fields with defaults may be omitted.
        - Construction goes through the normal initializer, so value objects
          re-validate their contents.
    """

    if not is_dataclass(dc_type):
        raise TypeError(f"{dc_type} is not a dataclass type")
    type_hints = get_type_hints(dc_type)
    kwargs: dict[str, Any] = {}
    for field in fields(dc_type):
        if not field.init:
            continue
        if field.name not in values:
            if _has_default(field):
                continue
            raise KeyError(f"Missing required field '{field.name}'")
        raw = values[field.name]
        hint = type_hints.get(field.name, field.type)
        nested = _dataclass_of(hint)
        if nested is None or isinstance(raw, nested):
            kwargs[field.name] = raw
        elif isinstance(raw, dict):
            kwargs[field.name] = dict_to_dataclass(nested, raw)
        elif raw is None and _is_optional(hint):
            kwargs[field.name] = None
        else:
            raise TypeError(
                f"Field '{field.name}' expects a {nested.__name__} object, "
                f"got {type(raw).__name__}"
            )
    return cast(D, dc_type(**kwargs))


def _has_default(field: Field[Any]) -> bool:
    return field.default is not MISSING or field.default_factory is not MISSING


def _dataclass_of(field_type: Any) -> type[Any] | None:
    """Return the dataclass behind `X` or `X | None`, else None."""
    if get_origin(field_type) in (Union, UnionType):
        members = [arg for arg in get_args(field_type) if arg is not NoneType]
        field_type = members[0] if len(members) == 1 else None
    return cast(type[Any], field_type) if is_dataclass(field_type) else None


def _is_optional(field_type: Any) -> bool:
    return get_origin(field_type) in (Union, UnionType) and NoneType in get_args(
        field_type
    )
