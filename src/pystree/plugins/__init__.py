# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Plugin loading helpers.

A plugin contributes handlers for new file extensions. ``--plugins=NAME``
first looks for an entry point called ``NAME`` in the ``pystree.plugins``
group and otherwise imports the module ``NAME``. The loaded object (the entry
point target, or the module's ``register`` attribute) is called with the
:class:`~pystree.handlers.HandlerRegistry`::

    def register(registry):
        registry.register(".toml", TomlHandler())

Modules without a ``register`` attribute are imported for their side effects
only.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import import_module, metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import TypeAlias, cast

from ..constants import LANGUAGE_SERVER_ENTRY_POINT_GROUP, PLUGIN_ENTRY_POINT_GROUP
from ..errors import PluginLoadError
from ..handlers.registry import HandlerRegistry

LOGGER = logging.getLogger(__name__)

PluginRegistrar: TypeAlias = Callable[[HandlerRegistry], None]
LanguageServer: TypeAlias = Callable[..., object]

_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``.

    Args:
        entries: Raw entry-point container returned by :func:`metadata.entry_points`.
        group: Name of the entry-point group to extract.

    Returns:
        Iterable[EntryPoint]: Entry points belonging to ``group``.
    """

    if isinstance(entries, Mapping):
        return entries.get(group, ())
    return entries.select(group=group)


def _entry_points(group: str) -> tuple[EntryPoint, ...]:
    return tuple(_select_entry_points(cast(_EntryPointSource, metadata.entry_points()), group))


def _resolve_registrar(name: str) -> PluginRegistrar | None:
    """Return the registration callable for plugin ``name``.

    Args:
        name: Plugin name given on the command line.

    Returns:
        PluginRegistrar | None: Callable to invoke, or ``None`` for side-effect-only modules.

    Raises:
        PluginLoadError: If the plugin cannot be imported.
    """

    for entry in _entry_points(PLUGIN_ENTRY_POINT_GROUP):
        if entry.name == name:
            try:
                return cast(PluginRegistrar, entry.load())
            except (AttributeError, ImportError, ValueError) as exc:
                raise PluginLoadError(name, str(exc)) from exc
    try:
        module = import_module(name)
    except ImportError as exc:
        raise PluginLoadError(name, str(exc)) from exc
    registrar = getattr(module, "register", None)
    return cast(PluginRegistrar, registrar) if callable(registrar) else None


def load_plugins(names: Sequence[str], registry: HandlerRegistry) -> None:
    """Load every plugin in ``names`` and let it extend ``registry``.

    Args:
        names: Plugin names in command-line order.
        registry: Registry receiving new extension handlers.

    Raises:
        PluginLoadError: If any plugin fails to import or register.
    """

    for name in names:
        registrar = _resolve_registrar(name)
        LOGGER.debug("loaded plugin %s (registrar=%r)", name, registrar)
        if registrar is None:
            continue
        try:
            registrar(registry)
        except Exception as exc:
            raise PluginLoadError(name, f"registration failed: {exc}") from exc


def load_language_server() -> LanguageServer | None:
    """Return the first language server exposed via entry points, if any.

    Returns:
        LanguageServer | None: Server callable, or ``None`` when none is installed.

    Raises:
        PluginLoadError: If the advertised server cannot be imported.
    """

    for entry in _entry_points(LANGUAGE_SERVER_ENTRY_POINT_GROUP):
        try:
            return cast(LanguageServer, entry.load())
        except (AttributeError, ImportError, ValueError) as exc:
            raise PluginLoadError(entry.name, str(exc)) from exc
    return None


__all__ = [
    "LanguageServer",
    "PluginRegistrar",
    "load_language_server",
    "load_plugins",
]
