"""Value types for PDN Core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VFloat:
    value: float

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VList:
    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True, slots=True, eq=False)
class VSet:
    """Unordered collection; duplicates are dropped on construction.

    ``items`` keeps the first occurrence of each value in insertion order.
    That order is an artifact of construction and carries no meaning:
    two sets compare equal whenever they hold the same values.
    """

    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        seen: set = set()
        unique: list[Value] = []
        for item in self.items:
            key = structural_key(item)
            if key in seen:
                continue
            seen.add(key)
            unique.append(item)
        object.__setattr__(self, "items", tuple(unique))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __contains__(self, value: object) -> bool:
        try:
            key = structural_key(value)  # type: ignore[arg-type]
        except TypeError:
            return False
        return any(structural_key(item) == key for item in self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VSet):
            return NotImplemented
        return structural_key(self) == structural_key(other)

    def __hash__(self) -> int:
        return hash(structural_key(self))


@dataclass(frozen=True, slots=True)
class VMap:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        return self.entries.get(key, default)


class _NilType:
    """Singleton standing for null, an empty list and an empty mapping."""

    _instance: "_NilType | None" = None

    def __new__(cls) -> "_NilType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nil"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "nil"

    def __reduce__(self):
        return (_NilType, ())


Nil = _NilType()

Value = Union[VBool, VInt, VFloat, VText, VList, VSet, VMap, _NilType]


# ---------------------------------------------------------------------------
# Structural equality
# ---------------------------------------------------------------------------

def structural_key(value: Value) -> tuple:
    """Return a hashable key; two values are structurally equal iff keys match.

    Lists compare in order, sets and mappings ignore order.
    """
    if value is Nil:
        return ("nil",)
    if isinstance(value, VBool):
        return ("bool", value.value)
    if isinstance(value, VInt):
        return ("int", value.value)
    if isinstance(value, VFloat):
        return ("float", value.value)
    if isinstance(value, VText):
        return ("text", value.value)
    if isinstance(value, VList):
        return ("list", tuple(structural_key(v) for v in value.items))
    if isinstance(value, VSet):
        return ("set", frozenset(structural_key(v) for v in value.items))
    if isinstance(value, VMap):
        return ("map", frozenset((k, structural_key(v)) for k, v in value.entries.items()))
    raise TypeError(f"not a PDN value: {type(value).__name__}")


def is_empty(value: Value) -> bool:
    """True for Nil and for every empty collection (they all write as ``nil``)."""
    if value is Nil:
        return True
    if isinstance(value, (VList, VSet, VMap)):
        return len(value) == 0
    return False


# ---------------------------------------------------------------------------
# Native Python conversion
# ---------------------------------------------------------------------------

def to_native(value: Value) -> Any:
    """Convert a value tree to plain Python objects.

    Sets become lists (first-occurrence order) since their members may be
    unhashable dicts or lists.
    """
    if value is Nil:
        return None
    if isinstance(value, (VBool, VInt, VFloat, VText)):
        return value.value
    if isinstance(value, (VList, VSet)):
        return [to_native(v) for v in value.items]
    if isinstance(value, VMap):
        return {k: to_native(v) for k, v in value.entries.items()}
    raise TypeError(f"not a PDN value: {type(value).__name__}")


def from_native(obj: Any) -> Value:
    """Convert plain Python objects to a value tree."""
    if obj is None:
        return Nil
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInt(obj)
    if isinstance(obj, float):
        return VFloat(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, (list, tuple)):
        return VList(tuple(from_native(v) for v in obj))
    if isinstance(obj, (set, frozenset)):
        return VSet(tuple(from_native(v) for v in obj))
    if isinstance(obj, dict):
        entries: dict[str, Value] = {}
        for k, v in obj.items():
            if not isinstance(k, str):
                raise TypeError(f"mapping keys must be str, got {type(k).__name__}")
            entries[k] = from_native(v)
        return VMap(entries)
    if isinstance(obj, (VBool, VInt, VFloat, VText, VList, VSet, VMap, _NilType)):
        return obj
    raise TypeError(f"cannot convert {type(obj).__name__} to a PDN value")
