from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from gradient_slice import GradientConfig, load_gradient_config, merge_overrides


def test_load_yaml_config(tmp_path: Path) -> None:
    config_path = tmp_path / "gradient.yml"
    config_path.write_text("max_width: 2\nmode: tokens\nseparator: ','\n", encoding="utf-8")

    config = load_gradient_config(config_path)

    assert config.max_width == 2
    assert config.mode == "tokens"
    assert config.separator == ","


def test_load_json_config(tmp_path: Path) -> None:
    config_path = tmp_path / "gradient.json"
    config_path.write_text(json.dumps({"mode": "bytes"}), encoding="utf-8")

    config = load_gradient_config(config_path)

    assert config.mode == "bytes"
    assert config.max_width is None


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_gradient_config(config_path) == GradientConfig()


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_gradient_config(tmp_path / "missing.yml")


def test_non_mapping_config_raises(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_gradient_config(config_path)


def test_malformed_json_raises(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.json"
    config_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_gradient_config(config_path)


@pytest.mark.parametrize(
    "payload",
    [{"max_width": -1}, {"mode": "words"}, {"separator": ""}, {"encoding": "no-such-codec"}, {"unknown": True}],
)
def test_invalid_fields_rejected(payload: dict) -> None:
    with pytest.raises(ValidationError):
        GradientConfig.from_mapping(payload)


def test_tokenize_modes() -> None:
    assert GradientConfig().tokenize("ab") == "ab"
    assert GradientConfig(mode="bytes").tokenize("é") == b"\xc3\xa9"
    assert GradientConfig(mode="tokens").tokenize("to be  or") == ["to", "be", "or"]
    assert GradientConfig(mode="tokens", separator=",").tokenize("a,,b") == ["a", "", "b"]


def test_build_and_render() -> None:
    config = GradientConfig(mode="tokens", max_width=2)
    rendered = [config.render(w) for w in config.build("to be or")]
    assert rendered == ["to", "be", "or", "to be", "be or"]

    bytes_config = GradientConfig(mode="bytes", max_width=1)
    assert [bytes_config.render(w) for w in bytes_config.build("AB")] == ["41", "42"]

    raw = GradientConfig(join=False, max_width=1)
    assert [raw.render(w) for w in raw.build("ab")] == [["a"], ["b"]]


def test_merge_overrides_ignores_none() -> None:
    base = GradientConfig(max_width=3, mode="tokens")
    merged = merge_overrides(base, {"max_width": None, "mode": "chars"})
    assert merged.max_width == 3
    assert merged.mode == "chars"
    with pytest.raises(ValidationError):
        merge_overrides(base, {"max_width": -2})


def test_known_encoding_is_accepted() -> None:
    config = GradientConfig(mode="bytes", encoding="latin-1")
    assert config.tokenize("é") == b"\xe9"
