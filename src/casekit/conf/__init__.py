"""Process-wide settings for casekit.

``settings`` starts out holding only the built-in defaults. Call
:func:`load_settings` (the CLI does this on startup) to pull in
``CASEKIT_*`` environment variables and the config module named by
``CASEKIT_CONFIG_MODULE``.
"""

import os

from .defaults import DEFAULTS
from .layered import (
    CONFIG_MODULE_ENVVAR,
    CONFIG_NAMESPACE_ENVVAR,
    ENV_PREFIX,
    Settings,
    as_bool,
    env_truthy,
)

__all__ = [
    "DEFAULTS",
    "Settings",
    "settings",
    "load_settings",
    "as_bool",
    "env_truthy",
    "ENV_PREFIX",
    "CONFIG_MODULE_ENVVAR",
    "CONFIG_NAMESPACE_ENVVAR",
]

settings = Settings()


def load_settings(target: Settings | None = None, *, namespace: str | None = None) -> Settings:
    """Fill the environ and module layers of ``target``.

    ``namespace`` restricts the config module to ``<namespace>_*``
    attributes; it defaults to ``CASEKIT_CONFIG_NAMESPACE``. Runtime
    assignments on ``target`` keep precedence over both layers.
    """
    target = settings if target is None else target
    if namespace is None:
        namespace = os.environ.get(CONFIG_NAMESPACE_ENVVAR) or None
    target.update_from_environ()
    target.update_from_envvar(namespace=namespace)
    return target
