"""Layered casekit settings.

Lookups walk the layers top to bottom::

    runtime      settings["KEY"] = ...
    module       the config module named by CASEKIT_CONFIG_MODULE
    environ      CASEKIT_<KEY> environment variables
    base         mappings passed to Settings(...)
    defaults     DEFAULTS

Each loader only ever writes its own layer, so load order does not change
precedence and ``reset()`` only forgets runtime assignments.
"""

import importlib
import logging
import os
from collections import ChainMap
from typing import Any, Iterator, Mapping, MutableMapping

from .defaults import DEFAULTS

logger = logging.getLogger(__name__)

ENV_PREFIX = "CASEKIT"
CONFIG_MODULE_ENVVAR = "CASEKIT_CONFIG_MODULE"
CONFIG_NAMESPACE_ENVVAR = "CASEKIT_CONFIG_NAMESPACE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_truthy(value: str | None) -> bool:
    """Return True if the string looks truthy ("1", "true", "yes", "on", case-insensitive)."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def as_bool(value: Any) -> bool:
    """Read a flag that may have come from a config module as text."""
    if isinstance(value, str):
        return env_truthy(value)
    return bool(value)


class Settings(MutableMapping[str, Any]):
    """Settings mapping with one ChainMap layer per source."""

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        self._runtime: dict[str, Any] = {}
        self._module: dict[str, Any] = {}
        self._environ: dict[str, Any] = {}
        base = (dict(layer) for layer in layers)
        self._storage = ChainMap(self._runtime, self._module, self._environ, *base, dict(DEFAULTS))

    def __getitem__(self, key: str) -> Any:
        return self._storage[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._runtime[key] = value

    def __delitem__(self, key: str) -> None:
        del self._runtime[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def get_bool(self, key: str) -> bool:
        return as_bool(self[key])

    def update_from_object(self, obj: str, *, namespace: str | None = None) -> None:
        """Replace the module layer with the upper-case attributes of module ``obj``.

        With ``namespace="CASEKIT"`` only ``CASEKIT_*`` attributes are read,
        prefix removed, so one shared config module can serve several tools.
        """
        module = importlib.import_module(obj)
        values = _module_settings(vars(module), namespace)
        logger.debug("Loaded %d setting(s) from module %s", len(values), obj)
        self._module.clear()
        self._module.update(values)

    def update_from_envvar(self, envvar: str = CONFIG_MODULE_ENVVAR, *, namespace: str | None = None) -> None:
        module_name = os.environ.get(envvar)
        if not module_name:
            return
        self.update_from_object(module_name, namespace=namespace)

    def update_from_environ(self, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None) -> None:
        """Replace the environ layer with ``<PREFIX>_<KEY>`` variables for every known key.

        Values are coerced to the type of the built-in default, so boolean
        settings accept the usual truthy spellings.
        """
        environ = os.environ if environ is None else environ
        self._environ.clear()
        for key, default in DEFAULTS.items():
            raw = environ.get(f"{prefix}_{key}")
            if raw is None:
                continue
            logger.debug("Setting %s from environment", key)
            self._environ[key] = env_truthy(raw) if isinstance(default, bool) else raw.strip()

    def reset(self, *, loaded: bool = False) -> None:
        """Drop every runtime assignment; with ``loaded=True`` also forget the module and environ layers."""
        self._runtime.clear()
        if loaded:
            self._module.clear()
            self._environ.clear()

    def as_dict(self) -> dict[str, Any]:
        return dict(self._storage)


def _module_settings(attrs: Mapping[str, Any], namespace: str | None) -> dict[str, Any]:
    if namespace is None:
        return {k: v for k, v in attrs.items() if k.isupper()}

    prefix = f"{namespace}_"
    return {k[len(prefix):]: v for k, v in attrs.items() if k.startswith(prefix) and k.isupper()}
