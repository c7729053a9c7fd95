"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar strictness."""

    mode: ParseMode = ParseMode.STRICT
    check_block_balance: bool = True
    require_value_terminator: bool = True
    strict_parameter_header: bool = True
    allow_bare_bool: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                check_block_balance=False,
                require_value_terminator=False,
                strict_parameter_header=False,
                allow_bare_bool=True,
            )

        return ParserOptions(mode=mode)
