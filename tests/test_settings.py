# tests/test_settings.py
import pytest

from subtp import DuplicateKeyPolicy, NewlineStyle, ParserSettings, RenderSettings


def test_defaults():
    assert ParserSettings().duplicate_keys is DuplicateKeyPolicy.LAST_WINS
    assert RenderSettings().newline is NewlineStyle.LF


def test_parser_settings_from_config():
    settings = ParserSettings.from_config({"duplicate_keys": "reject"})
    assert settings.duplicate_keys is DuplicateKeyPolicy.REJECT
    assert ParserSettings.from_config({}) == ParserSettings()


def test_render_settings_from_config():
    settings = RenderSettings.from_config({"newline": "crlf"})
    assert settings.newline is NewlineStyle.CRLF
    assert settings.newline.sequence == "\r\n"
    assert RenderSettings.from_config({}).newline.sequence == "\n"


@pytest.mark.parametrize("factory, cfg", [
    (ParserSettings.from_config, {"duplicate_keys": "first_wins"}),
    (RenderSettings.from_config, {"newline": "cr"}),
])
def test_from_config_rejects_unknown_values(factory, cfg):
    with pytest.raises(ValueError):
        factory(cfg)


def test_to_dict_round_trip():
    parser_settings = ParserSettings(duplicate_keys=DuplicateKeyPolicy.REJECT)
    render_settings = RenderSettings(newline=NewlineStyle.CRLF)

    assert parser_settings.to_dict() == {"duplicate_keys": "reject"}
    assert render_settings.to_dict() == {"newline": "crlf"}
    assert ParserSettings.from_config(parser_settings.to_dict()) == parser_settings
    assert RenderSettings.from_config(render_settings.to_dict()) == render_settings
