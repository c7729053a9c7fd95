"""AST data model for PBRT scene files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias


class DirectiveKind(StrEnum):
    """Directive keywords, spelled as they appear in scene files."""

    # Block control
    WORLD_BEGIN = "WorldBegin"
    WORLD_END = "WorldEnd"
    ATTRIBUTE_BEGIN = "AttributeBegin"
    ATTRIBUTE_END = "AttributeEnd"
    TRANSFORM_BEGIN = "TransformBegin"
    TRANSFORM_END = "TransformEnd"
    OBJECT_BEGIN = "ObjectBegin"
    OBJECT_END = "ObjectEnd"

    INCLUDE = "Include"

    # Options and scene elements
    ACCELERATOR = "Accelerator"
    CAMERA = "Camera"
    FILM = "Film"
    FILTER = "Filter"
    PIXEL_FILTER = "PixelFilter"
    INTEGRATOR = "Integrator"
    MAKE_NAMED_MEDIUM = "MakeNamedMedium"
    SAMPLER = "Sampler"
    AREA_LIGHT_SOURCE = "AreaLightSource"
    LIGHT_SOURCE = "LightSource"
    MAKE_NAMED_MATERIAL = "MakeNamedMaterial"
    MATERIAL = "Material"
    SHAPE = "Shape"
    TEXTURE = "Texture"

    # References
    NAMED_MATERIAL = "NamedMaterial"
    OBJECT_INSTANCE = "ObjectInstance"
    COORDINATE_SYSTEM = "CoordinateSystem"
    COORD_SYS_TRANSFORM = "CoordSysTransform"

    REVERSE_ORIENTATION = "ReverseOrientation"
    MEDIUM_INTERFACE = "MediumInterface"
    ACTIVE_TRANSFORM = "ActiveTransform"

    # Transforms
    IDENTITY = "Identity"
    TRANSLATE = "Translate"
    SCALE = "Scale"
    ROTATE = "Rotate"
    LOOK_AT = "LookAt"
    TRANSFORM = "Transform"
    CONCAT_TRANSFORM = "ConcatTransform"
    TRANSFORM_TIMES = "TransformTimes"


class ValueShape(StrEnum):
    """What kind of tokens a parameter value is made of."""

    NUMBERS = "numbers"
    INTEGERS = "integers"
    BOOLS = "bools"
    STRINGS = "strings"
    NUMBERS_OR_NAME = "numbers_or_name"


class ParamType(StrEnum):
    """Canonical parameter types; aliases collapse onto these."""

    FLOAT = "float"
    INTEGER = "integer"
    BOOL = "bool"
    STRING = "string"
    POINT2 = "point2"
    VECTOR2 = "vector2"
    POINT3 = "point3"
    VECTOR3 = "vector3"
    NORMAL3 = "normal3"
    COLOR = "color"
    SPECTRUM = "spectrum"
    BLACKBODY = "blackbody"
    TEXTURE = "texture"

    @property
    def arity(self) -> int:
        """Number of flat values that make up one item."""
        if self in (ParamType.POINT3, ParamType.VECTOR3, ParamType.NORMAL3, ParamType.COLOR):
            return 3
        if self in (ParamType.POINT2, ParamType.VECTOR2):
            return 2
        return 1

    @property
    def shape(self) -> ValueShape:
        match self:
            case ParamType.INTEGER:
                return ValueShape.INTEGERS
            case ParamType.BOOL:
                return ValueShape.BOOLS
            case ParamType.STRING | ParamType.TEXTURE:
                return ValueShape.STRINGS
            case ParamType.SPECTRUM:
                return ValueShape.NUMBERS_OR_NAME
            case _:
                return ValueShape.NUMBERS


ParamScalar: TypeAlias = float | int | bool | str
ParamValues: TypeAlias = tuple[float, ...] | tuple[int, ...] | tuple[bool, ...] | tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Parameter:
    """Named, typed value attached to a directive, e.g. `"float fov" [90]`.

    `values` is always flat; `items` groups it by the type's arity.
    `declared_type` keeps the typeword as written (`rgb`, `point`, ...).
    """

    name: str
    type: ParamType
    values: ParamValues
    declared_type: str

    @property
    def items(self) -> tuple[ParamScalar, ...] | tuple[tuple[float, ...], ...]:
        arity = self.type.arity
        if arity == 1:
            return self.values
        return tuple(self.values[i : i + arity] for i in range(0, len(self.values), arity))

    @property
    def is_named_spectrum(self) -> bool:
        return self.type == ParamType.SPECTRUM and len(self.values) == 1 and isinstance(self.values[0], str)


class ActiveTime(StrEnum):
    START_TIME = "StartTime"
    END_TIME = "EndTime"
    ALL = "All"


class MediumSide(StrEnum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    UNSET = ""


@dataclass(frozen=True, slots=True)
class AstBareDirective:
    """Directive without arguments: block control, `Identity`, `ReverseOrientation`."""

    kind: DirectiveKind


@dataclass(frozen=True, slots=True)
class AstReferenceDirective:
    """Directive naming one thing: `ObjectBegin`, `NamedMaterial`, `ObjectInstance`, ..."""

    kind: DirectiveKind
    name: str


@dataclass(frozen=True, slots=True)
class AstInclude:
    """`Include "path"`; the path is literal and resolved by the caller."""

    path: str
    kind: DirectiveKind = field(default=DirectiveKind.INCLUDE, init=False)


@dataclass(frozen=True, slots=True)
class AstEntityDirective:
    """Option or scene element, e.g. `Shape "sphere" "float radius" [1]`."""

    kind: DirectiveKind
    class_name: str
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True, slots=True)
class AstTexture:
    """`Texture "name" "type" "class" params...`."""

    name: str
    value_type: str
    class_name: str
    parameters: tuple[Parameter, ...] = ()
    kind: DirectiveKind = field(default=DirectiveKind.TEXTURE, init=False)


@dataclass(frozen=True, slots=True)
class AstMediumInterface:
    side: MediumSide
    medium: str
    kind: DirectiveKind = field(default=DirectiveKind.MEDIUM_INTERFACE, init=False)


@dataclass(frozen=True, slots=True)
class AstActiveTransform:
    time: ActiveTime
    kind: DirectiveKind = field(default=DirectiveKind.ACTIVE_TRANSFORM, init=False)


@dataclass(frozen=True, slots=True)
class AstTransformDirective:
    """Transform operation on the CTM, captured as raw floats.

    Matrix ordering for `Transform`/`ConcatTransform` is left to the consumer.
    """

    kind: DirectiveKind
    values: tuple[float, ...]


AstDirective: TypeAlias = (
    AstBareDirective
    | AstReferenceDirective
    | AstInclude
    | AstEntityDirective
    | AstTexture
    | AstMediumInterface
    | AstActiveTransform
    | AstTransformDirective
)


@dataclass(frozen=True, slots=True)
class AstDocument:
    """Ordered directives of one scene file."""

    directives: tuple[AstDirective, ...]

    def __len__(self) -> int:
        return len(self.directives)

    def __iter__(self) -> Iterator[AstDirective]:
        return iter(self.directives)

    def of_kind(self, kind: DirectiveKind) -> tuple[AstDirective, ...]:
        return tuple(directive for directive in self.directives if directive.kind == kind)


__all__ = [
    "ActiveTime",
    "AstActiveTransform",
    "AstBareDirective",
    "AstDirective",
    "AstDocument",
    "AstEntityDirective",
    "AstInclude",
    "AstMediumInterface",
    "AstReferenceDirective",
    "AstTexture",
    "AstTransformDirective",
    "DirectiveKind",
    "MediumSide",
    "ParamScalar",
    "ParamType",
    "ParamValues",
    "Parameter",
    "ValueShape",
]
