"""Runtime type and shape inspection shared by the built-in checkers."""

from __future__ import annotations

import asyncio
import dataclasses
import functools
import inspect
import queue
import weakref
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel


T = TypeVar("T")

_MISSING = object()


class Kind(Enum):
    """Shape classification of a runtime value."""

    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    FUNCTION = "function"
    REFERENCE = "reference"
    CHANNEL = "channel"
    RECORD = "record"
    OBJECT = "object"

    @property
    def is_scalar(self) -> bool:
        """Check if values of this kind compare by plain value."""
        return self in _SCALAR_KINDS


_SCALAR_KINDS = frozenset(
    {Kind.BOOL, Kind.INT, Kind.FLOAT, Kind.COMPLEX, Kind.STRING, Kind.BYTES}
)


@dataclass(frozen=True)
class PointerType:
    """Dynamic type of a :class:`Ref`, identified by its element type."""

    elem: Any

    def __str__(self) -> str:
        return f"Ref[{type_name(self.elem)}]"


class Ref(Generic[T]):
    """Reference to a value, carrying the declared type of what it points at.

    A ``Ref`` plays the part of a pointer: it may point at a value, or it may
    be nil while still knowing its element type. ``Ref.var`` is the third
    state, a reference to a variable that exists but holds nothing yet; the
    reference itself is not nil, only its contents are. Two distinct refs are
    different objects; :func:`deep_equal` compares them by their pointees.

    Examples
    --------
    >>> Ref.to(Point(1, 2)).elem_type is Point
    True
    >>> Ref.nil(list).is_nil
    True
    >>> Ref.var(Sized).is_nil
    False
    >>> Ref.var(Sized).get() is None
    True
    """

    __slots__ = ("_elem_type", "_target", "_var", "__weakref__")

    def __init__(self, elem_type: Any, target: T | None = None, *, var: bool = False) -> None:
        self._elem_type = elem_type
        self._target = target
        self._var = var

    @classmethod
    def to(cls, value: T) -> Ref[T]:
        """Return a reference pointing at ``value``."""
        if value is None:
            raise TypeError("Ref.to() needs a value; use Ref.nil(elem_type) for a nil reference")
        return cls(type_of(value), value)

    @classmethod
    def nil(cls, elem_type: Any) -> Ref[Any]:
        """Return a nil reference whose element type is ``elem_type``."""
        return cls(elem_type)

    @classmethod
    def var(cls, elem_type: Any) -> Ref[Any]:
        """Return a reference to an unset variable of declared type ``elem_type``.

        The reference is not nil; dereferencing it gives ``None`` until a value
        is stored. Used to name an interface for :data:`verdict.checkers.implements`.
        """
        return cls(elem_type, var=True)

    @property
    def elem_type(self) -> Any:
        return self._elem_type

    @property
    def is_nil(self) -> bool:
        return self._target is None and not self._var

    def get(self) -> T | None:
        """Dereference, raising ``ValueError`` on a nil reference."""
        if self.is_nil:
            raise ValueError(f"nil dereference of {PointerType(self._elem_type)}")
        return self._target

    def set(self, value: T | None) -> None:
        """Store ``value``; ``None`` makes a plain reference nil and empties a variable."""
        if value is not None and not _assignable(value, self._elem_type):
            raise TypeError(
                f"cannot assign {type_name(type_of(value))} to {PointerType(self._elem_type)}"
            )
        self._target = value

    def __repr__(self) -> str:
        if self.is_nil:
            return f"{PointerType(self._elem_type)}(nil)"
        if self._target is None:
            return f"{PointerType(self._elem_type)}(unset)"
        return f"{PointerType(self._elem_type)}({self._target!r})"


def _assignable(value: Any, elem_type: Any) -> bool:
    if is_interface(elem_type):
        return satisfies_interface(value, elem_type)
    return type_of(value) == elem_type


def type_of(value: Any) -> Any:
    """Return the dynamic type of ``value``.

    ``None`` carries no type information and yields ``None``; a :class:`Ref`
    yields a :class:`PointerType`; anything else yields ``type(value)``.
    """
    if value is None:
        return None
    if isinstance(value, Ref):
        return PointerType(value.elem_type)
    return type(value)


def type_name(tp: Any) -> str:
    """Human-readable name for a type returned by :func:`type_of`."""
    if tp is None:
        return "nil"
    if isinstance(tp, type):
        return tp.__qualname__
    return str(tp)


def kind_of(value: Any) -> Kind:
    """Classify ``value`` by shape."""
    if value is None:
        return Kind.INVALID
    # weakref.ref is callable, so references are classified before functions
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return Kind.REFERENCE
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, complex):
        return Kind.COMPLEX
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if isinstance(value, (queue.Queue, queue.SimpleQueue, asyncio.Queue)):
        return Kind.CHANNEL
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Set):
        return Kind.SET
    if isinstance(value, Sequence):
        return Kind.SEQUENCE
    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return Kind.FUNCTION
    if _is_record(value):
        return Kind.RECORD
    return Kind.OBJECT


def _is_record(value: Any) -> bool:
    if isinstance(value, type):
        return False
    if dataclasses.is_dataclass(value) or isinstance(value, (BaseModel, BaseException)):
        return True
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


def is_nil(value: Any) -> bool:
    """Check if ``value`` is nil.

    ``None`` is nil. A reference-like value is nil when it no longer points
    at anything: a nil :class:`Ref` or a dead ``weakref.ref``. Concrete values
    such as ``0``, ``""`` or ``[]`` are never nil.
    """
    if value is None:
        return True
    if isinstance(value, Ref):
        return value.is_nil
    if isinstance(value, weakref.ReferenceType):
        return value() is None
    return False


def stringify(value: Any) -> str | None:
    """Return the string form of ``value``, or ``None`` if it has none.

    Strings are returned as-is. Exceptions and instances of classes that
    define their own ``__str__`` are converted with ``str()``. Builtin values
    such as numbers and containers are not considered stringifiable.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        return str(value)
    for klass in type(value).__mro__:
        if "__str__" in klass.__dict__:
            if klass is object or klass.__module__ == "builtins":
                return None
            return str(value)
    return None


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality with matching dynamic types at every level.

    Parameters
    ----------
    a, b
        Values to compare.

    Returns
    -------
    bool
        ``True`` if both values have the same dynamic type and the same
        content. Refs compare by their pointees, records field by field,
        containers element-wise. Self-referencing structures terminate.
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if type_of(a) != type_of(b):
        return False
    kind = kind_of(a)
    if kind is Kind.INVALID:
        return True
    if kind.is_scalar:
        return a == b
    if a is b:
        return True

    pair = (id(a), id(b))
    if pair in visited:
        return True
    visited.add(pair)

    if kind is Kind.REFERENCE:
        if isinstance(a, Ref):
            if a.is_nil or b.is_nil:
                return a.is_nil and b.is_nil
            return _deep_equal(a.get(), b.get(), visited)
        return _deep_equal(a(), b(), visited)
    if kind is Kind.SEQUENCE:
        return len(a) == len(b) and all(_deep_equal(x, y, visited) for x, y in zip(a, b))
    if kind is Kind.MAPPING:
        return _mapping_equal(a, b, visited)
    if kind is Kind.SET:
        return _set_equal(a, b, visited)
    if kind is Kind.CHANNEL:
        return False
    if kind is Kind.RECORD:
        if not _is_structural_record(a) and _defines_eq(type(a)):
            return a == b
        return _mapping_equal(_record_fields(a), _record_fields(b), visited)
    return a == b


def _mapping_equal(a: Mapping[Any, Any], b: Mapping[Any, Any], visited: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    # 1, 1.0 and True hash alike, so the key stored in b is checked too
    stored_keys = {key: key for key in b}
    for key, value in a.items():
        other_key = stored_keys.get(key, _MISSING)
        if other_key is _MISSING or not _deep_equal(key, other_key, visited):
            return False
        if not _deep_equal(value, b[other_key], visited):
            return False
    return True


def _set_equal(a: Set[Any], b: Set[Any], visited: set[tuple[int, int]]) -> bool:
    if len(a) != len(b):
        return False
    stored = {item: item for item in b}
    for item in a:
        other = stored.get(item, _MISSING)
        if other is _MISSING or not _deep_equal(item, other, visited):
            return False
    return True


def _is_structural_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) or isinstance(value, (BaseModel, BaseException))


def _defines_eq(cls: type) -> bool:
    for klass in cls.__mro__:
        if "__eq__" in klass.__dict__:
            return klass is not object
    return False


def _record_fields(value: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, BaseModel):
        fields = {name: getattr(value, name) for name in type(value).model_fields}
        fields.update(value.model_extra or {})
        return fields

    fields = dict(getattr(value, "__dict__", {}))
    for name in _slot_names(type(value)):
        attr = getattr(value, name, _MISSING)
        if attr is not _MISSING:
            fields[name] = attr
    if isinstance(value, BaseException):
        fields["__args__"] = value.args
    return fields


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


# Interfaces

_PROTOCOL_INTERNALS = frozenset(
    {
        "__abstractmethods__",
        "__annotate__",
        "__annotate_func__",
        "__annotations__",
        "__annotations_cache__",
        "__class_getitem__",
        "__dict__",
        "__doc__",
        "__firstlineno__",
        "__init__",
        "__init_subclass__",
        "__module__",
        "__new__",
        "__non_callable_proto_members__",
        "__orig_bases__",
        "__parameters__",
        "__protocol_attrs__",
        "__qualname__",
        "__slots__",
        "__static_attributes__",
        "__subclasshook__",
        "__type_params__",
        "__weakref__",
        "_is_protocol",
        "_is_runtime_protocol",
    }
)


def is_interface(tp: Any) -> bool:
    """Check if ``tp`` is an interface: a ``Protocol`` class or an abstract class."""
    if not isinstance(tp, type):
        return False
    if tp.__dict__.get("_is_protocol", False):
        return True
    return inspect.isabstract(tp)


def satisfies_interface(value: Any, iface: type) -> bool:
    """Check if ``value`` provides every member of ``iface``.

    Protocols are checked structurally, member by member; abstract classes
    use ``isinstance`` so registration and ``__subclasshook__`` apply.
    """
    if value is None:
        return False
    if not iface.__dict__.get("_is_protocol", False):
        return isinstance(value, iface)

    for name, is_method in protocol_members(iface).items():
        attr = getattr(value, name, _MISSING)
        if attr is _MISSING:
            return False
        if is_method and not callable(attr):
            return False
    return True


def protocol_members(iface: type) -> dict[str, bool]:
    """Map each member name of a protocol to whether it is a method."""
    members: dict[str, bool] = {}
    for base in reversed(iface.__mro__):
        if base in (object, Protocol, Generic):
            continue
        if not base.__dict__.get("_is_protocol", False):
            # collections.abc bases such as Sized contribute their abstract methods
            for name in getattr(base, "__abstractmethods__", ()):
                members[name] = True
            continue
        for name in inspect.get_annotations(base):
            members.setdefault(name, False)
        for name, attr in base.__dict__.items():
            if name in _PROTOCOL_INTERNALS or name.startswith("_abc_"):
                continue
            is_method = callable(attr) or isinstance(attr, (staticmethod, classmethod))
            if name.startswith("__") and not is_method:
                continue
            members[name] = is_method
    return members
