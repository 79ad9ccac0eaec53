"""Tests for logging configuration."""

from __future__ import annotations

import logging

from legaloutline.utils.logging_config import ExtraFieldsFormatter, get_logger


class TestExtraFieldsFormatter:
    """Tests for ExtraFieldsFormatter."""

    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("legaloutline.test", logging.INFO, __file__, 1, "Loaded analysis", (), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_appends_extra_fields(self) -> None:
        formatter = ExtraFieldsFormatter("%(levelname)s %(message)s")
        record = self._record(section_count=3, analysis_filename="lease.pdf")

        assert formatter.format(record) == "INFO Loaded analysis | analysis_filename='lease.pdf' section_count=3"

    def test_plain_record(self) -> None:
        formatter = ExtraFieldsFormatter("%(levelname)s %(message)s")
        assert formatter.format(self._record()) == "INFO Loaded analysis"


def test_get_logger_returns_named_logger() -> None:
    logger = get_logger("legaloutline.session")
    assert logger.name == "legaloutline.session"
    assert logging.getLogger("legaloutline").handlers
