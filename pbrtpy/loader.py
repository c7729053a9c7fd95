"""Filesystem loader that resolves `Include` directives.

The parser only reports the literal include path; this module is the
caller-side collaborator that reads included files, parses them as
fragments and splices their directives in place of the `Include`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from os import PathLike
from pathlib import Path

from pbrtpy.ast import AstDirective, AstDocument, AstInclude
from pbrtpy.diagnostics import PbrtParseError, build_error
from pbrtpy.diagnostics.codes import LOADER_INCLUDE_CYCLE, LOADER_INCLUDE_FAILED
from pbrtpy.parser import ParseMode, ParserOptions, find_block_imbalance, parse_document
from pbrtpy.parser.scene import resolve_options
from pbrtpy.text import TextRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _SplicedDirective:
    directive: AstDirective
    source: str
    path: str
    range: TextRange


def load_scene(
    path: str | PathLike[str],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    encoding: str = "utf-8",
) -> AstDocument:
    """Parse a scene file with every `Include` spliced in.

    Included paths are resolved relative to the including file. Each file
    is parsed as a fragment; block balance, when requested, is checked once
    over the spliced result. Failures inside included files are re-raised as
    `IncludeError` positioned at the `Include` directive, with the nested
    error chained as `__cause__`. Reading the root file itself may raise
    `OSError`.
    """
    resolved_options = resolve_options(options=options, mode=mode)
    fragment_options = replace(resolved_options, check_block_balance=False)

    entries = _load_entries(Path(path), fragment_options, encoding, chain=())

    if resolved_options.check_block_balance:
        imbalance = find_block_imbalance([entry.directive.kind for entry in entries])
        if imbalance is not None:
            entry = entries[imbalance.index]
            raise build_error(imbalance.spec, entry.source, entry.range, imbalance.message, path=entry.path)

    return AstDocument(tuple(entry.directive for entry in entries))


def _load_entries(
    path: Path,
    options: ParserOptions,
    encoding: str,
    *,
    chain: tuple[Path, ...],
) -> list[_SplicedDirective]:
    text = path.read_text(encoding=encoding)
    parsed = parse_document(text, options, path=str(path))
    current_chain = (*chain, path.resolve())

    entries: list[_SplicedDirective] = []
    for directive, directive_range in zip(parsed.document.directives, parsed.ranges, strict=True):
        if not isinstance(directive, AstInclude):
            entries.append(_SplicedDirective(directive, text, str(path), directive_range))
            continue

        target = path.parent / directive.path
        if target.resolve() in current_chain:
            raise build_error(
                LOADER_INCLUDE_CYCLE,
                text,
                directive_range,
                f'Include cycle: "{directive.path}" is already being loaded',
                path=str(path),
            )

        logger.debug("Including %s from %s", target, path)
        try:
            entries.extend(_load_entries(target, options, encoding, chain=current_chain))
        except OSError as error:
            logger.error("Cannot read %s included from %s: %s", target, path, error)
            raise build_error(
                LOADER_INCLUDE_FAILED,
                text,
                directive_range,
                f'Cannot read included file "{directive.path}": {error.strerror or error}',
                path=str(path),
            ) from error
        except PbrtParseError as error:
            logger.error("Failed to parse %s included from %s: %s", target, path, error.format())
            raise build_error(
                LOADER_INCLUDE_FAILED,
                text,
                directive_range,
                f'Error in included file "{directive.path}": {error.format()}',
                path=str(path),
            ) from error

    return entries


__all__ = ["load_scene"]
