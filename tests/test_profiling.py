"""Tests for the stage timing decorator."""

import pytest
from loguru import logger

from cl_image_resizer.utils.profiling import timed


@pytest.fixture
def log_records():
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


def test_timed_logs_seconds_at_info(log_records: list[tuple[str, str]]) -> None:
    @timed
    def stage(value: int) -> int:
        return value * 2

    assert stage(21) == 42

    profile = [record for record in log_records if "[PROFILE]" in record[1]]
    assert len(profile) == 1
    level, message = profile[0]
    assert level == "INFO"
    assert "stage took" in message
    assert message.endswith("s")


def test_timed_logs_when_stage_raises(log_records: list[tuple[str, str]]) -> None:
    @timed
    def failing() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError):
        failing()

    assert any("[PROFILE]" in message for _, message in log_records)
