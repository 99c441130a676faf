import pytest

from portclean.config.errors import ConfigurationError


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (
            ConfigurationError.invalid_value,
            ("name", 5, "must be positive"),
            "Invalid value for name: 5. must be positive",
        ),
        (
            ConfigurationError.load_failed,
            ("configuration", "/tmp/.env"),
            "Failed to load configuration for /tmp/.env",
        ),
    ],
)
def test_configuration_error_factories(factory, args, expected):
    assert str(factory(*args)) == expected
