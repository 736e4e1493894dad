"""Shared test fixtures for Chapter Scanner tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep probe settings independent of the developer's env and config.toml."""
    monkeypatch.delenv("CHAPTERSCAN_FFPROBE", raising=False)
    monkeypatch.delenv("CHAPTERSCAN_PROBE_TIMEOUT", raising=False)
    monkeypatch.setenv("CHAPTERSCAN_CONFIG", str(tmp_path / "missing-config.toml"))


@pytest.fixture
def ffprobe_chapters_report():
    """Return a mock ffprobe -show_chapters JSON result."""
    return {
        "chapters": [
            {
                "id": 0,
                "time_base": "1/1000",
                "start": 0,
                "start_time": "0.000000",
                "end": 125000,
                "end_time": "125.000000",
                "tags": {"title": "Intro"},
            },
            {
                "id": 1,
                "time_base": "1/1000",
                "start": 125000,
                "start_time": "125.000000",
                "end": 310500,
                "end_time": "310.500000",
                "tags": {"title": "Verse riff"},
            },
            {
                "id": 2,
                "time_base": "1/1000",
                "start": 310500,
                "start_time": "310.500000",
                "end": 402000,
                "end_time": "402.000000",
                "tags": {"title": "Solo"},
            },
        ]
    }
