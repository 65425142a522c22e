"""Common fixtures for testing svg-combine."""

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from svg_combine.constants import INPUT_LOGGER_NAME, LOGGER_NAME
from svg_combine.utils.path_utils import path_resolver
from tests.samples import SIMPLE_SVG

SvgWriter = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory without user configuration."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(path_resolver, "user_config_dir", tmp_path / "no-user-config")


@pytest.fixture(autouse=True)
def reset_app_logger() -> Generator[None, None, None]:
    """Remove handlers installed by setup_logging after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logging.getLogger(INPUT_LOGGER_NAME).setLevel(logging.NOTSET)


@pytest.fixture()
def svg_dir(tmp_path: Path) -> Path:
    """Directory holding the input files of a test."""
    directory = tmp_path / "icons"
    directory.mkdir()
    return directory


@pytest.fixture()
def write_svg(svg_dir: Path) -> SvgWriter:
    """Write an SVG file and return its path.

    The file goes into ``svg_dir`` unless a subdirectory is given.
    """

    def _write(name: str, content: str = SIMPLE_SVG, subdir: str | None = None) -> Path:
        directory = svg_dir / subdir if subdir else svg_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
