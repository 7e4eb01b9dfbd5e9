"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/options.py
Comparator configuration with built-in validation.
Checkers and comparers are merged over the defaults key by key;
type_order and ignore_direction_of_types replace the defaults as a whole.
"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, FrozenSet, Optional, Tuple, Union

from sortcompare.core.comparers import TYPE_COMPARERS
from sortcompare.core.kinds import TYPE_CHECKERS, TYPE_ORDER
from sortcompare.core.models import Direction, Kind, TypeChecker, TypeComparer

DEFAULT_IGNORE_DIRECTION_OF_TYPES = frozenset({Kind.ARRAY})


def _names(value: Any, option: str) -> Tuple[str, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValueError(f"'{option}' must be a sequence of kind names, got {value!r}")
    names = tuple(value)
    for name in names:
        if not isinstance(name, str):
            raise ValueError(f"'{option}' contains a non-string kind name: {name!r}")
    return names


def _merged(defaults: Mapping, overrides: Optional[Mapping], option: str) -> Mapping:
    if overrides is None:
        overrides = {}
    if not isinstance(overrides, Mapping):
        raise ValueError(f"'{option}' must be a mapping of kind name to function, got {overrides!r}")
    merged = dict(defaults)
    merged.update(overrides)
    for kind, func in merged.items():
        if not callable(func):
            raise ValueError(f"'{option}' entry for kind '{kind}' is not callable: {func!r}")
    return MappingProxyType(merged)


@dataclass(frozen=True)
class CompareOptions:
    """Resolved, immutable comparator options."""
    direction: Direction = Direction.ASC
    type_order: Tuple[str, ...] = TYPE_ORDER
    type_checkers: Mapping[str, TypeChecker] = field(default_factory=dict)
    type_comparers: Mapping[str, TypeComparer] = field(default_factory=dict)
    ignore_direction_of_types: FrozenSet[str] = DEFAULT_IGNORE_DIRECTION_OF_TYPES

    def __post_init__(self):
        """Normalize and validate immediately after creation."""
        set_ = object.__setattr__  # frozen dataclass
        set_(self, "direction", Direction.ASC if self.direction is None else Direction.parse(self.direction))
        set_(self, "type_order", _names(self.type_order, "type_order"))
        set_(self, "ignore_direction_of_types",
             frozenset(_names(self.ignore_direction_of_types, "ignore_direction_of_types")))
        set_(self, "type_checkers", _merged(TYPE_CHECKERS, self.type_checkers, "type_checkers"))
        set_(self, "type_comparers", _merged(TYPE_COMPARERS, self.type_comparers, "type_comparers"))

        missing = [kind for kind in self.type_order if kind not in self.type_checkers]
        if missing:
            raise ValueError(f"No type checker registered for kind(s): {', '.join(missing)}")

    @classmethod
    def from_config(cls, config: Union[None, str, Direction, Mapping, "CompareOptions"] = None) -> "CompareOptions":
        """
        Factory accepting every shorthand the comparator supports:
        None (all defaults), a direction string or Direction,
        a mapping of option names, or an existing CompareOptions.
        """
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, (str, Direction)):
            return cls(direction=config)
        if isinstance(config, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = sorted(str(key) for key in config if key not in known)
            if unknown:
                raise ValueError(f"Unknown comparator option(s): {', '.join(unknown)}")
            return cls(**config)
        raise ValueError(f"Unsupported comparator configuration: {config!r}")
