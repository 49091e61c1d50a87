"""Tests for loguru setup and the rendering context wrappers."""

import pytest
from loguru import logger

import vitae
from vitae.contexts.rendering.logger import _log_debug, _log_info, log_render_result, setup_rendering_logger
from vitae.utils.logger import collect_provenance, setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.disable("vitae")


@pytest.mark.unit
def test_setup_creates_log_file(tmp_path):
    log_dir = tmp_path / "logs" / "render_1"
    log_file = setup_rendering_logger(log_dir, engine="latex", template_id="moderncv-banking")

    assert log_file == log_dir / "render.log"
    assert log_file.exists()


@pytest.mark.unit
def test_messages_carry_context_prefix(tmp_path):
    log_file = setup_rendering_logger(tmp_path, engine="html")

    _log_info("Rendering resume.yaml")
    log_render_result("html", "calm", "<html>\n</html>\n")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Engine: html" in text
    assert "[render] Rendering resume.yaml" in text
    assert "[render] Rendered html/calm: 2 lines, 15 chars" in text


@pytest.mark.unit
def test_provenance_header(tmp_path):
    log_file = setup_logger("render", tmp_path, extra_provenance={"Engine": "markdown"})
    logger.remove()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("=" * 80)
    assert f"vitae: {vitae.__version__}" in lines[1]
    assert any(line.endswith("Engine: markdown") for line in lines)
    assert lines[6].endswith("=" * 80)


@pytest.mark.unit
def test_collect_provenance_fields():
    assert list(collect_provenance()) == ["vitae", "Command", "Working directory", "Python"]


@pytest.mark.unit
def test_debug_goes_to_file_only(tmp_path, capsys):
    log_file = setup_logger("render", tmp_path, console_level="INFO")

    _log_debug("Template context ready")
    logger.remove()

    assert "[render] Template context ready" in log_file.read_text(encoding="utf-8")
    assert "Template context ready" not in capsys.readouterr().out


@pytest.mark.unit
def test_setup_again_starts_new_session(tmp_path):
    setup_logger("render", tmp_path / "first")
    second = setup_logger("render", tmp_path / "second")

    _log_info("Second session")
    logger.remove()

    assert "Second session" not in (tmp_path / "first" / "render.log").read_text(encoding="utf-8")
    assert "Second session" in second.read_text(encoding="utf-8")
