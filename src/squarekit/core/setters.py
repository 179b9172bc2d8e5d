"""Declarative field setters used by Builder.

A body type lists its chainable setters in a ``setters`` table, for example::

    setters = {
        "location_id": assign("order.location_id"),
        "add_service_charge": append("order.service_charges"),
        "taxable": constant("taxable", True),
    }

Setters never validate and never fail on a missing intermediate object:
intermediate optional sub-models along a dotted path are created on first use.
"""

import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Union

from pydantic import BaseModel


def _model_type(annotation: Any) -> type[BaseModel] | None:
    """Find the BaseModel class inside an annotation such as ``Order | None``."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        for arg in typing.get_args(annotation):
            found = _model_type(arg)
            if found is not None:
                return found
    return None


def resolve(body: BaseModel, path: str) -> tuple[BaseModel, str]:
    """Walk a dotted path, creating empty sub-models where needed.

    Returns the object owning the last segment and that segment's name.
    """
    *parents, leaf = path.split(".")
    target = body
    for name in parents:
        child = getattr(target, name)
        if child is None:
            field = type(target).model_fields[name]
            model = _model_type(field.annotation)
            if model is None:
                raise TypeError(f"{type(target).__name__}.{name} is not a model field")
            setattr(target, name, model())
            child = getattr(target, name)
        target = child
    return target, leaf


@dataclass(frozen=True)
class SetterSpec:
    """Base class for one entry of a setter table."""

    def apply(self, body: BaseModel, *args: Any, **kwargs: Any) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class Assign(SetterSpec):
    path: str

    def apply(self, body: BaseModel, value: Any) -> None:
        target, leaf = resolve(body, self.path)
        setattr(target, leaf, value)


@dataclass(frozen=True)
class Append(SetterSpec):
    path: str

    def apply(self, body: BaseModel, value: Any) -> None:
        target, leaf = resolve(body, self.path)
        current = getattr(target, leaf) or []
        setattr(target, leaf, [*current, value])


@dataclass(frozen=True)
class AddUnique(SetterSpec):
    path: str

    def apply(self, body: BaseModel, value: Any) -> None:
        target, leaf = resolve(body, self.path)
        current = getattr(target, leaf) or []
        if value in current:
            return
        setattr(target, leaf, [*current, value])


@dataclass(frozen=True)
class Constant(SetterSpec):
    path: str
    value: Any

    def apply(self, body: BaseModel) -> None:
        target, leaf = resolve(body, self.path)
        setattr(target, leaf, self.value)


@dataclass(frozen=True)
class Compute(SetterSpec):
    func: Callable[..., None]

    def apply(self, body: BaseModel, *args: Any, **kwargs: Any) -> None:
        self.func(body, *args, **kwargs)


def assign(path: str) -> Assign:
    return Assign(path)


def append(path: str) -> Append:
    return Append(path)


def add_unique(path: str) -> AddUnique:
    return AddUnique(path)


def constant(path: str, value: Any) -> Constant:
    return Constant(path, value)


def compute(func: Callable[..., None]) -> Compute:
    return Compute(func)
