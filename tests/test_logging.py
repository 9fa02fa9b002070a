"""Tests for please logging functionality."""

import json
import logging
from pathlib import Path

import pytest

from please.core import logging as please_logging
from please.core.logging import configure_logging, default_log_file, get_logger, sanitise_context


class TestSanitiseContext:
    """Tests for sanitise_context."""

    def test_drops_none_values(self) -> None:
        """Test None values are removed."""
        event_dict = {'event': 'x', 'vendor': None, 'returncode': 0}

        assert sanitise_context(None, 'info', event_dict) == {'event': 'x', 'returncode': 0}


class TestLogFile:
    """Tests for log file selection and output."""

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test PLEASE_LOG_FILE is used and its directory created."""
        target = tmp_path / 'nested' / 'please.log'
        monkeypatch.setenv('PLEASE_LOG_FILE', str(target))

        assert default_log_file() == target
        assert target.parent.is_dir()

    def test_events_written_as_json(self, tmp_path: Path) -> None:
        """Test events land in the file as JSON lines."""
        log_file = tmp_path / 'events.log'
        configure_logging(level='DEBUG', log_file=log_file, force=True)
        try:
            get_logger('please.test').info('vendor_resolved', vendor='Apt')
            for handler in logging.root.handlers:
                handler.flush()

            records = [json.loads(line) for line in log_file.read_text().splitlines()]
            assert records[-1]['event'] == 'vendor_resolved'
            assert records[-1]['vendor'] == 'Apt'
            assert records[-1]['level'] == 'info'
        finally:
            configure_logging(force=True)

    def test_configure_once(self, tmp_path: Path) -> None:
        """Test configure_logging is a no-op once configured."""
        assert please_logging._CONFIGURED
        configure_logging(log_file=tmp_path / 'ignored.log')

        assert not (tmp_path / 'ignored.log').exists()
