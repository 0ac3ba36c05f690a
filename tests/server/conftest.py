"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from serialgps.gps import FixFrame


class ControlledGPS:
    """Stands in for SerialGPS; yields frames put on ``message_queue``."""

    def __init__(self) -> None:
        self.message_queue: queue.Queue[FixFrame | None] = queue.Queue()
        self.entered = False

    def __enter__(self) -> "ControlledGPS":
        self.entered = True
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[FixFrame]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


@pytest.fixture(autouse=True)
def gps_controller() -> Iterator[ControlledGPS]:
    controller = ControlledGPS()
    with patch("server.main.SerialGPS", return_value=controller):
        yield controller
    controller.message_queue.put(None)
