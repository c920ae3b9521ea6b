"""
Persistence protocol - opaque key/value container the game is saved into
"""

from collections.abc import Sequence
from typing import Protocol


class StateContainer(Protocol):
    """
    Container used to carry the game state across interruptions.

    See :class:`touch_pong.utils.bundle.StateBundle` for the bundled implementation.
    """

    def put_float_array(self, key: str, values: Sequence[float]) -> None:
        ...

    def get_float_array(self, key: str) -> Sequence[float]:
        ...

    def put_int(self, key: str, value: int) -> None:
        ...

    def get_int(self, key: str) -> int:
        ...

    def __contains__(self, key: object) -> bool:
        ...
