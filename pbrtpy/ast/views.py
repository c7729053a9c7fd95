"""Consumer views built on top of canonical AST nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from pbrtpy.ast.model import (
    AstDirective,
    AstEntityDirective,
    AstTexture,
    Parameter,
    ParamScalar,
    ParamType,
    ParamValues,
)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParamSetView:
    """Typed lookups over a directive's parameter list.

    A parameter is addressed by name *and* type, so `"float radius"` and
    `"integer radius"` never shadow each other. When a name/type pair is
    declared more than once the last declaration wins.
    """

    parameters: tuple[Parameter, ...]

    @staticmethod
    def of(directive: AstDirective) -> "ParamSetView":
        if isinstance(directive, (AstEntityDirective, AstTexture)):
            return ParamSetView(directive.parameters)
        return ParamSetView(())

    def names(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for parameter in self.parameters:
            seen.setdefault(parameter.name, None)
        return tuple(seen)

    def get(self, name: str, type: ParamType) -> Parameter | None:
        for parameter in reversed(self.parameters):
            if parameter.name == name and parameter.type == type:
                return parameter
        return None

    def find(self, name: str, type: ParamType) -> ParamValues:
        parameter = self.get(name, type)
        if parameter is None:
            return ()
        return parameter.values

    def find_items(self, name: str, type: ParamType) -> tuple[ParamScalar, ...] | tuple[tuple[float, ...], ...]:
        parameter = self.get(name, type)
        if parameter is None:
            return ()
        return parameter.items

    def find_one(self, name: str, type: ParamType, default: T) -> ParamScalar | tuple[float, ...] | T:
        items = self.find_items(name, type)
        if len(items) != 1:
            return default
        return items[0]


__all__ = ["ParamSetView"]
