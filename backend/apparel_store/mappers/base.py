"""
Field-copy helper shared by the mappers
"""
from typing import Any, Iterable


def copy_fields(source: Any, target: Any, fields: Iterable[str], skip_none: bool = False) -> Any:
    """
    Copy the named attributes from source to target

    Args:
        source: Object to read from (usually a DTO)
        target: Object to write to (usually an entity)
        fields: Attribute names, identical on both sides
        skip_none: Leave the target attribute untouched when the source value is None

    Returns:
        The target
    """
    for field in fields:
        value = getattr(source, field)
        if skip_none and value is None:
            continue
        setattr(target, field, value)
    return target
