import pytest

from casekit.conventions import CAMEL, DOT, KEBAB, SUPPORTED_CONVENTIONS, normalize_convention
from casekit.exceptions import InvalidInputTypeError, UnknownConventionError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("kebab", KEBAB),
        (" KEBAB ", KEBAB),
        ("kebab-case", KEBAB),
        ("kebab_case", KEBAB),
        ("camel", CAMEL),
        ("camelCase", CAMEL),
        ("camel case", CAMEL),
        ("dot", DOT),
        ("dot.case", DOT),
        ("Dot-Case", DOT),
    ],
)
def test_normalize_convention_accepts_aliases(value, expected):
    assert normalize_convention(value) == expected


@pytest.mark.parametrize("value", ["snake", "", "case", "pascal-case", "kebabs"])
def test_normalize_convention_rejects_unknown(value):
    with pytest.raises(UnknownConventionError) as excinfo:
        normalize_convention(value)

    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.supported == SUPPORTED_CONVENTIONS
    assert "supported conventions: kebab, camel, dot" in str(excinfo.value)


def test_normalize_convention_rejects_non_strings():
    with pytest.raises(InvalidInputTypeError, match="Expected str for convention, received NoneType"):
        normalize_convention(None)
