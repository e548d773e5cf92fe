"""Shared serialisation helpers for model dataclasses."""

from __future__ import annotations

import dataclasses

_field_defaults_cache: dict[tuple[type, frozenset[str]], dict] = {}


def _field_defaults(cls: type, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return a dict of ``{field_name: default}`` for a dataclass.

    Only fields with plain defaults are included; required fields and
    fields listed in *exclude* are skipped.  ``to_dict()`` methods use
    this to drop values that equal their defaults.  Results are cached
    per ``(cls, exclude)`` pair.
    """
    key = (cls, exclude)
    if key not in _field_defaults_cache:
        _field_defaults_cache[key] = {
            f.name: f.default
            for f in dataclasses.fields(cls)
            if f.default is not dataclasses.MISSING
            and f.name not in exclude
        }
    return _field_defaults_cache[key]


def _non_default_items(obj: object, *, exclude: frozenset[str] = frozenset()) -> dict:
    """Return ``{name: value}`` for fields of *obj* that differ from their defaults."""
    defaults = _field_defaults(type(obj), exclude=exclude)
    return {
        name: getattr(obj, name)
        for name, default in defaults.items()
        if getattr(obj, name) != default
    }
