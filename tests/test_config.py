from __future__ import annotations

import pytest

from match_analyzer.core.config import Settings
from match_analyzer.domain.enums import StatResolution


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "CSV_DELIMITER", "STAT_RESOLUTION"):
        monkeypatch.delenv(f"MATCH_ANALYZER_{name}", raising=False)
    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.csv_delimiter == ","
    assert settings.stat_resolution == StatResolution.COMPLETE


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MATCH_ANALYZER_STAT_RESOLUTION", "kills_only")
    monkeypatch.setenv("MATCH_ANALYZER_CSV_DELIMITER", ";")

    settings = Settings(_env_file=None)

    assert settings.stat_resolution == StatResolution.KILLS_ONLY
    assert settings.csv_delimiter == ";"
