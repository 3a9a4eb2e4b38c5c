import pytest

from clargs.value_type import ValueType


@pytest.mark.parametrize(
    "value_type,expects,requires",
    [
        (ValueType.NO_VALUE, False, False),
        (ValueType.OPTIONAL_VALUE, True, False),
        (ValueType.REQUIRED_VALUE, True, True),
    ],
)
def test_semantics(value_type, expects, requires):
    assert value_type.expects_value() is expects
    assert value_type.requires_value() is requires


def test_display_value():
    assert ValueType.NO_VALUE.display_value == "none"
    assert ValueType.OPTIONAL_VALUE.display_value == "optional"
    assert ValueType.REQUIRED_VALUE.display_value == "required"
    assert str(ValueType.REQUIRED_VALUE) == "required"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("none", ValueType.NO_VALUE),
        ("no", ValueType.NO_VALUE),
        ("NO_VALUE", ValueType.NO_VALUE),
        (" Optional ", ValueType.OPTIONAL_VALUE),
        ("optional_value", ValueType.OPTIONAL_VALUE),
        ("required", ValueType.REQUIRED_VALUE),
        ("REQUIRED_VALUE", ValueType.REQUIRED_VALUE),
    ],
)
def test_aliases(raw, expected):
    assert ValueType(raw) is expected


def test_invalid_value():
    with pytest.raises(ValueError, match="Must be one of: none, optional, required"):
        ValueType("sometimes")
    with pytest.raises(ValueError):
        ValueType(3)
