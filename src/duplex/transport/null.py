"""Transport strategies that go nowhere.

Useful for testing, and for contexts where the feature using a channel is
disabled. Sends complete immediately; nothing is ever received.
"""

from __future__ import annotations

from typing import Any, Optional

from .base import Receiver, Sender


class NullSender(Sender):

    def send(self, command: str, data: Any, correlation_id: Optional[str]) -> None:
        return None

    def teardown(self) -> None:
        pass


class NullReceiver(Receiver):

    def teardown(self) -> None:
        pass
