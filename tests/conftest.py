import pytest

from casekit.conf import CONFIG_MODULE_ENVVAR, CONFIG_NAMESPACE_ENVVAR, DEFAULTS, settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Every test starts from the built-in defaults with no CASEKIT_* env leaking in."""
    for key in DEFAULTS:
        monkeypatch.delenv(f"CASEKIT_{key}", raising=False)
    monkeypatch.delenv(CONFIG_MODULE_ENVVAR, raising=False)
    monkeypatch.delenv(CONFIG_NAMESPACE_ENVVAR, raising=False)
    settings.reset(loaded=True)
    yield settings
    settings.reset(loaded=True)
