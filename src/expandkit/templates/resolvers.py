"""Macro resolvers: functions mapping a macro name to its value.

A resolver returns None when it does not know the name. Resolvers can be
composed with resolve_many, the first one returning a value wins.
"""

import re
from collections.abc import Mapping
from typing import Any, Callable, Optional

from pydantic import BaseModel

from ..settings.models import SettingsSection

Resolver = Callable[[str], Optional[Any]]


def resolve_many(*resolvers: Resolver) -> Resolver:
    """
    Return a resolver which asks given resolvers in order.

    Args:
        resolvers: Resolvers to compose. They are asked left to right and
            the first non-None value is returned.

    Returns:
        Resolver function
    """

    def resolver(name: str) -> Optional[Any]:
        for candidate in resolvers:
            value = candidate(name)
            if value is not None:
                return value
        return None

    return resolver


def resolve_mapping(data: Mapping) -> Resolver:
    """Return a resolver which looks names up as exact keys of a mapping."""

    def resolver(name: str) -> Optional[Any]:
        return data.get(name)

    return resolver


def resolve_section(section: SettingsSection) -> Resolver:
    """Return a resolver which reads keys from a settings section."""
    return resolve_mapping(section.entries)


def _public_members(data: Any) -> list[str]:
    """Instance attributes and properties of an object, in definition order.

    Class attributes and members inherited from pydantic's BaseModel
    (model_fields, model_config, ...) are not data and are left out.
    """
    members = list(getattr(data, "__dict__", {}))
    if isinstance(data, BaseModel):
        members.extend(type(data).model_fields)

    for klass in type(data).__mro__:
        for member, value in vars(klass).items():
            if isinstance(value, property):
                members.append(member)

    return [
        member
        for member in dict.fromkeys(members)
        if not member.startswith("_") and not hasattr(BaseModel, member)
    ]


def _find_member(data: Any, name: str, ignore_case: bool) -> Optional[str]:
    if not name or name.startswith("_"):
        return None

    members = _public_members(data)
    if name in members:
        return name

    if ignore_case:
        lowered = name.lower()
        for member in members:
            if member.lower() == lowered:
                return member

    return None


def resolve_attribute(data: Any, ignore_case: bool = False) -> Resolver:
    """
    Return a resolver which uses public attributes and properties of an object.

    Only instance attributes and properties are used. Methods, class
    attributes and private (underscore) members never resolve.

    Args:
        data: Data object
        ignore_case: If True, case is ignored when matching attribute names

    Returns:
        Resolver function
    """

    def resolver(name: str) -> Optional[Any]:
        member = _find_member(data, name, ignore_case)
        if member is None:
            return None

        value = getattr(data, member)
        if callable(value):
            return None
        return value

    return resolver


def resolve_match(match: re.Match) -> Resolver:
    """Return a resolver which uses named groups of a regex match."""

    def resolver(name: str) -> Optional[Any]:
        try:
            return match.group(name)
        except IndexError:
            # No such group
            return None

    return resolver


def resolve_source(source: Any, ignore_case: bool = False) -> Resolver:
    """
    Build a resolver for any supported data source.

    Args:
        source: A resolver function, a mapping, a settings section,
            a regex match or any object (resolved by attributes)
        ignore_case: Ignore case of attribute names (objects only)

    Returns:
        Resolver function
    """
    if isinstance(source, SettingsSection):
        return resolve_section(source)
    if isinstance(source, Mapping):
        return resolve_mapping(source)
    if isinstance(source, re.Match):
        return resolve_match(source)
    if callable(source) and not isinstance(source, type):
        return source
    return resolve_attribute(source, ignore_case)
