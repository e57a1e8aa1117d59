"""
Модульные тесты для pixelrender/__init__.py
Тестирует метаданные, логирование, конфигурацию и публичный API.
"""

import json
import logging
import re
from pathlib import Path

import pytest

import pixelrender


class TestVersionMetadata:
    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", pixelrender.__version__)

    def test_version_components(self) -> None:
        expected = (
            f"{pixelrender.VERSION_MAJOR}."
            f"{pixelrender.VERSION_MINOR}."
            f"{pixelrender.VERSION_PATCH}"
        )
        assert pixelrender.__version__ == expected


class TestLogging:
    def test_package_logger_configured(self) -> None:
        root = logging.getLogger("pixelrender")
        assert root.handlers
        assert root.propagate is False

    def test_setup_logging_idempotent(self) -> None:
        root = logging.getLogger("pixelrender")
        before = len(root.handlers)
        pixelrender._setup_logging()
        assert len(root.handlers) == before

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("plugins.svg", "pixelrender.plugins.svg"),
            ("__main__", "pixelrender.main"),
            ("pixelrender.renderer", "pixelrender.renderer"),
            (".relative", "pixelrender.relative"),
            ("pixelrenderer_other", "pixelrender.pixelrenderer_other"),
        ],
    )
    def test_get_logger_namespacing(self, name: str, expected: str) -> None:
        assert pixelrender.get_logger(name).name == expected

    def test_module_loggers_are_children(self) -> None:
        from pixelrender.renderer import pixel_renderer

        assert pixel_renderer.logger.name.startswith("pixelrender.")


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        config = pixelrender.load_config(tmp_path / "missing.json")
        assert config == pixelrender._DEFAULT_CONFIG
        assert config is not pixelrender._DEFAULT_CONFIG

    def test_user_values_override(self, tmp_path: Path) -> None:
        path = tmp_path / "pixelrender.json"
        path.write_text(json.dumps({"foreground": "#123456", "font_size": 14}), encoding="utf-8")
        config = pixelrender.load_config(path)
        assert config["foreground"] == "#123456"
        assert config["font_size"] == 14
        assert config["background"] == "white"

    def test_invalid_json_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert pixelrender.load_config(path) == pixelrender._DEFAULT_CONFIG

    def test_non_object_falls_back(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert pixelrender.load_config(path) == pixelrender._DEFAULT_CONFIG

    def test_default_path_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "pixelrender.json").write_text('{"font_family": "Mono"}', encoding="utf-8")
        assert pixelrender.load_config()["font_family"] == "Mono"


def test_check_dependencies() -> None:
    deps = pixelrender.check_dependencies()
    assert set(deps) == {"pillow", "python-barcode", "qrcode"}
    assert all(deps.values())


def test_public_api_exports() -> None:
    for name in pixelrender.__all__:
        assert hasattr(pixelrender, name), name
    assert pixelrender.InvalidArgumentError is not None
    assert issubclass(pixelrender.InvalidArgumentError, ValueError)
    assert issubclass(pixelrender.MatrixSourceError, pixelrender.RenderError)


def test_render_error_str_includes_context() -> None:
    err = pixelrender.InvalidArgumentError(
        "bad", barcode_format=pixelrender.BarcodeFormat.EAN_8, context={"len": 3}
    )
    assert str(err) == "InvalidArgumentError: bad [format=EAN_8] (len=3)"
    assert "barcode_format" in repr(err)
