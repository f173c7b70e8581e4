"""Tests for config loading and named styles."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from statbar.config import (
    AppConfig,
    StyleConfig,
    config_path,
    init_config,
    load_config,
)
from statbar.models import NO_TEXT, AtLeft, AtRight, BarTextType, FilledBar, HollowBar, TextBar


@pytest.fixture
def xdg(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


def _write(xdg: Path, data) -> Path:
    path = xdg / "statbar" / "settings.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return path


class TestStyleConfig:
    """StyleConfig parsing and conversion."""

    def test_text_defaults_to_dbar_look(self) -> None:
        sc = StyleConfig.from_dict({"name": "x"})
        assert sc.to_bar_type() == TextBar("[", "=", None, " ", "]", 20)

    def test_text_with_middle(self) -> None:
        sc = StyleConfig.from_dict(
            {"name": "cpu", "filled": "#", "middle": ">", "background": ".", "width": 30}
        )
        assert sc.to_bar_type() == TextBar("[", "#", ">", ".", "]", 30)

    def test_filled(self) -> None:
        sc = StyleConfig.from_dict(
            {"name": "mem", "type": "filled", "size": [60, 8], "filled": "#88cc88"}
        )
        assert sc.to_bar_type() == FilledBar("#88cc88", None, (60, 8))

    def test_hollow(self) -> None:
        sc = StyleConfig.from_dict(
            {"name": "disk", "type": "hollow", "size": [80, 12], "border": "red"}
        )
        assert sc.to_bar_type() == HollowBar(None, None, "red", (80, 12))

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            StyleConfig.from_dict({"name": "x", "type": "pie"})

    def test_bad_colour_rejected(self) -> None:
        with pytest.raises(ValueError):
            StyleConfig.from_dict({"name": "x", "type": "filled", "filled": "not-a-colour"})

    def test_to_dict_roundtrip(self) -> None:
        original = {"name": "disk", "type": "hollow", "size": [80, 12], "border": "red"}
        assert StyleConfig.from_dict(original).to_dict() == original


class TestAppConfig:
    """AppConfig lookup and label placement."""

    def test_default_has_builtin_styles(self) -> None:
        cfg = AppConfig.default()
        assert cfg.style_names == ["dbar", "gdbar"]
        assert cfg.style().name == "dbar"

    def test_unknown_style_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            AppConfig.default().style("nope")

    @pytest.mark.parametrize(
        ("label", "kind", "expected"),
        [
            ("left", "percentage", AtLeft(BarTextType.PERCENTAGE)),
            ("right", "absolute", AtRight(BarTextType.ABSOLUTE)),
            ("none", "percentage", NO_TEXT),
        ],
    )
    def test_bar_text(self, label: str, kind: str, expected) -> None:
        cfg = AppConfig(label=label, label_kind=kind)
        assert cfg.bar_text() == expected

    def test_file_styles_override_builtins(self) -> None:
        cfg = AppConfig.from_dict({"styles": [{"name": "dbar", "width": 5}]})
        assert cfg.style("dbar").width == 5
        assert cfg.style_names == ["dbar", "gdbar"]

    def test_bad_style_skipped_with_warning(self, capsys) -> None:
        cfg = AppConfig.from_dict({"styles": [{"type": "text"}, {"name": "ok"}]})
        assert cfg.style_names == ["dbar", "gdbar", "ok"]
        assert "statbar: skipping style" in capsys.readouterr().err

    def test_non_string_middle_skipped_with_warning(self, capsys) -> None:
        cfg = AppConfig.from_dict({"styles": [{"name": "t", "middle": 5}]})
        assert "t" not in cfg.style_names
        assert "non-string middle 5" in capsys.readouterr().err

    def test_unknown_default_style_rejected(self) -> None:
        with pytest.raises(ValueError):
            AppConfig.from_dict({"default_style": "missing"})

    def test_bad_label_rejected(self) -> None:
        with pytest.raises(ValueError):
            AppConfig.from_dict({"label": "top"})


class TestLoadConfig:
    """Reading settings.json from the XDG directory."""

    def test_config_path_uses_xdg(self, xdg: Path) -> None:
        assert config_path() == xdg / "statbar" / "settings.json"

    def test_missing_file_gives_defaults(self, xdg: Path) -> None:
        assert load_config() == AppConfig.default()

    def test_loads_file(self, xdg: Path) -> None:
        _write(xdg, {"styles": [{"name": "cpu", "width": 8}], "default_style": "cpu", "output": "rich"})
        cfg = load_config()
        assert cfg.style().name == "cpu"
        assert cfg.output == "rich"

    def test_bad_json_falls_back(self, xdg: Path, capsys) -> None:
        _write(xdg, "{not json")
        assert load_config() == AppConfig.default()
        assert "statbar: bad config" in capsys.readouterr().err

    def test_init_config_writes_defaults(self, xdg: Path, capsys) -> None:
        init_config()
        data = json.loads(config_path().read_text())
        assert [s["name"] for s in data["styles"]] == ["dbar", "gdbar"]
        assert AppConfig.from_dict(data) == AppConfig.default()
        assert "Created config" in capsys.readouterr().out

    def test_init_config_keeps_existing(self, xdg: Path, capsys) -> None:
        path = _write(xdg, {"label": "right"})
        init_config()
        assert json.loads(path.read_text()) == {"label": "right"}
        assert "already exists" in capsys.readouterr().out
