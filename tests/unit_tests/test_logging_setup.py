"""Unit tests for the two-file log routing."""

from __future__ import annotations

import logging
from pathlib import Path

from model_to_image.logging_setup import configure_logging


def test_splits_records_by_level(tmp_path: Path) -> None:
    """Info goes to stdout.log, errors to stderr.log."""
    configure_logging(tmp_path)
    log = logging.getLogger("model_to_image.test")

    log.info("starting conversions")
    log.error("failed to export")
    for handler in logging.getLogger("model_to_image").handlers:
        handler.flush()

    out = (tmp_path / "stdout.log").read_text(encoding="utf-8")
    err = (tmp_path / "stderr.log").read_text(encoding="utf-8")
    assert "starting conversions" in out
    assert "failed to export" not in out
    assert "failed to export" in err
    assert "starting conversions" not in err


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    """Repeated configuration does not stack handlers."""
    configure_logging(tmp_path / "first")
    logger = configure_logging(tmp_path / "second", debug=True)

    files = sorted(
        Path(handler.baseFilename).parent.name  # type: ignore[attr-defined]
        for handler in logger.handlers
    )
    assert files == ["second", "second"]
    assert logger.level == logging.DEBUG
