# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for a single pystree invocation."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import DEFAULT_PRINT_WIDTH
from ..errors import ConfigError


class Options(BaseModel):
    """Immutable options shared by every worker of one invocation."""

    model_config = ConfigDict(frozen=True)

    print_width: int = Field(default=DEFAULT_PRINT_WIDTH, ge=1)
    plugins: tuple[str, ...] = ()

    @classmethod
    def from_cli(cls, *, print_width: int, plugins: Iterable[str] | None) -> Options:
        """Build options from parsed command-line values.

        Each ``--plugins`` occurrence may carry a comma-separated list. Names
        are kept in the order given; repeated names are kept once.

        Args:
            print_width: Final ``--print-width`` value.
            plugins: Raw ``--plugins`` values, one per flag occurrence.

        Returns:
            Options: Validated, frozen options.

        Raises:
            ConfigError: If a value fails validation.
        """

        try:
            return cls(print_width=print_width, plugins=split_plugin_names(plugins))
        except ValidationError as exc:
            raise ConfigError(_describe_validation_error(exc)) from exc


def split_plugin_names(values: Iterable[str] | None) -> tuple[str, ...]:
    """Return de-duplicated plugin names from comma-separated flag values.

    Args:
        values: Raw flag values such as ``"a,b"``.

    Returns:
        tuple[str, ...]: Plugin names in first-seen order.
    """

    names: list[str] = []
    for value in values or ():
        for raw in value.split(","):
            name = raw.strip()
            if name and name not in names:
                names.append(name)
    return tuple(names)


def _describe_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(entry) for entry in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or str(exc)


__all__ = ["Options", "split_plugin_names"]
