"""Typed AST for PBRT scene files."""

from pbrtpy.ast.model import (
    ActiveTime,
    AstActiveTransform,
    AstBareDirective,
    AstDirective,
    AstDocument,
    AstEntityDirective,
    AstInclude,
    AstMediumInterface,
    AstReferenceDirective,
    AstTexture,
    AstTransformDirective,
    DirectiveKind,
    MediumSide,
    Parameter,
    ParamScalar,
    ParamType,
    ParamValues,
    ValueShape,
)
from pbrtpy.ast.views import ParamSetView

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
    "ParamSetView",
    "ParamType",
    "ParamValues",
    "Parameter",
    "ValueShape",
]
