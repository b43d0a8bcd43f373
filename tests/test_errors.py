import pytest

from raycube.errors import CubError, format_error


def test_format_error_layout():
    assert format_error("boom") == "\033[31mERROR\nboom\n\033[0m"


def test_format_error_wraps_message_in_colour():
    text = format_error("map index out")
    assert text.startswith("\033[31m")
    assert text.endswith("\033[0m")
    assert "map index out" in text


def test_cub_error_message_formats():
    with pytest.raises(CubError) as info:
        raise CubError("Configuration: Duplicate")
    assert info.value.message == "Configuration: Duplicate"
    assert str(info.value) == "Configuration: Duplicate"
    assert (
        format_error(info.value.message)
        == "\033[31mERROR\nConfiguration: Duplicate\n\033[0m"
    )


def test_cub_error_is_exception():
    assert issubclass(CubError, Exception)
    assert CubError().message == ""