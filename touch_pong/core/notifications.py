"""
Messages pushed by the game to the host UI (status line and score)
"""

import queue
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class StatusMessage:
    """Status line update (win, lose, paused), hidden when visible is False"""

    text: str
    visible: bool


@dataclass(frozen=True)
class ScoreMessage:
    """Score line update"""

    text: str


Message = StatusMessage | ScoreMessage
MessageSink = Callable[[Message], None]


def discard(message: Message) -> None:
    """Sink used when nobody listens"""


class MessageChannel:
    """
    Thread-safe channel between the game loop and the UI thread.

    The game calls :meth:`send` (usually while holding the game lock) and the
    UI thread drains pending messages with :meth:`poll`. Sending never blocks
    and nothing is acknowledged.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[Message] = queue.SimpleQueue()

    def __call__(self, message: Message) -> None:
        self.send(message)

    def send(self, message: Message) -> None:
        self._queue.put(message)

    def poll(self) -> list[Message]:
        """Returns every pending message, oldest first"""
        messages = []
        while True:
            try:
                messages.append(self._queue.get_nowait())
            except queue.Empty:
                return messages
