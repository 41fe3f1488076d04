import pytest

from wordsworth.config import (
    DEFAULT_TOOLS,
    WordsworthConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_defaults():
    cfg = load_config()
    assert cfg == WordsworthConfig()
    assert cfg.tools == list(DEFAULT_TOOLS)
    assert cfg.history_limit == 20
    assert config_from_dict(None) == WordsworthConfig()


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"reader_context": "Managers", "colour": "blue", "tools": "pronouns"})
    assert cfg.reader_context == "Managers"
    assert cfg.tools == ["pronouns"]


def test_config_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "reader_context: Small business owners\n"
        "include_jargon: true\n"
        "tools:\n  - style-check\n  - readability\n",
        encoding="utf-8",
    )
    cfg = config_from_yaml(path)
    assert cfg.reader_context == "Small business owners"
    assert cfg.include_jargon is True
    assert cfg.tools == ["style-check", "readability"]
    assert cfg.to_dict()["tools"] == ["style-check", "readability"]


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == WordsworthConfig()


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- readability\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)
