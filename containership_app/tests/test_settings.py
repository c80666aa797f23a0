"""Tests for settings and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from containership_app.config import limits
from containership_app.config.settings import Settings, init_logging


class TestSettings:
    def test_default_console_only(self):
        s = Settings.default()
        assert s.log_file is None
        assert s.log_level == logging.INFO
        assert s.data_dir.name == "containership_app_data"

    def test_default_with_log_file(self):
        s = Settings.default(log_to_file=True)
        assert s.log_file is not None
        assert s.log_file.parent == s.data_dir

    def test_init_logging_installs_file_handler(self, tmp_path, root_logging):
        log_file = tmp_path / "logs" / "containership.log"
        s = Settings(project_root=tmp_path, data_dir=tmp_path, log_file=log_file)
        init_logging(s)
        assert log_file.parent.is_dir()
        file_handlers = [h for h in root_logging.handlers if isinstance(h, logging.FileHandler)]
        assert [Path(h.baseFilename) for h in file_handlers] == [log_file]
        assert root_logging.level == logging.INFO

    def test_init_logging_replaces_existing_handlers(self, tmp_path, root_logging):
        stale = logging.StreamHandler()
        root_logging.addHandler(stale)
        init_logging(Settings(project_root=tmp_path, data_dir=tmp_path))
        assert stale not in root_logging.handlers
        assert len(root_logging.handlers) == 1


class TestLimits:
    def test_fractions(self):
        assert limits.LIQUID_HAZARDOUS_FILL_FRACTION < limits.LIQUID_FILL_FRACTION <= 1.0
        assert 0.0 < limits.GAS_RESIDUAL_FRACTION < 1.0
        assert limits.KG_PER_TONNE == 1000.0
