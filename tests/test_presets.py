import pytest

from passgen.exceptions import ConfigurationError
from passgen.presets import PRESETS, preset_to_options, resolve_options


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_every_preset_builds_valid_options(name: str):
    options = resolve_options(name)
    assert options.word_count == PRESETS[name]["word_count"]
    assert options.length == PRESETS[name]["length"]


def test_preset_names_are_case_insensitive():
    assert preset_to_options(" Strong ") == PRESETS["strong"]


def test_preset_to_options_returns_a_copy():
    options = preset_to_options("complex")
    options["word_count"] = 16
    assert PRESETS["complex"]["word_count"] == 4


def test_unknown_preset_raises_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        preset_to_options("extreme")
    assert "extreme" in str(exc.value)


def test_overrides_win_over_preset():
    options = resolve_options("complex", word_count=6, use_complex_delimiters=False)
    assert options.word_count == 6
    assert options.use_complex_delimiters is False
    assert options.randomize_delimiters is True


def test_none_overrides_are_ignored():
    options = resolve_options("numbers", include_numbers=None, length=None)
    assert options.include_numbers is True
    assert options.length == 20


def test_no_preset_uses_defaults():
    options = resolve_options(None, include_numbers=True)
    assert options.include_numbers is True
    assert options.word_count == 2
    assert options.length == 16
