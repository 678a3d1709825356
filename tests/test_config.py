from pathlib import Path

import pytest

from editor_stats.config import EditorStatsConfig, config_from_dict, load_config


def test_load_config_defaults():
    cfg = load_config(None)

    assert cfg == EditorStatsConfig()
    assert cfg.new_document_name == "New File"
    assert cfg.input_extensions == [".txt", ".md"]


def test_config_from_yaml_ignores_unknown_keys(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "new_document_name: Untitled\n"
        "input_extensions: [txt, .RST]\n"
        "log_level: debug\n"
        "theme: dark\n",
        encoding="utf-8",
    )
    cfg = load_config(path)

    assert cfg.new_document_name == "Untitled"
    assert cfg.input_extensions == [".txt", ".rst"]
    assert cfg.log_level == "debug"


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


def test_empty_yaml_uses_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == EditorStatsConfig()


def test_to_dict_round_trips_through_config_from_dict():
    cfg = EditorStatsConfig(encoding="latin-1")

    assert config_from_dict(cfg.to_dict()) == cfg


def test_scalar_input_extension_becomes_single_item_list():
    cfg = config_from_dict({"input_extensions": "txt"})

    assert cfg.input_extensions == [".txt"]


def test_non_list_input_extensions_are_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("input_extensions: {txt: true}\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)
