"""
Key/value container used to carry game state across interruptions
"""

import json
from pathlib import Path
from typing import Any

import numpy as np


class StateBundle:
    """
    Small typed key/value store.

    Float records are kept as ``float64`` arrays and integers as plain ints.
    The bundle can be written to and read from a JSON file so that a session
    survives the application being closed.
    """

    def __init__(self) -> None:
        self._float_arrays: dict[str, np.ndarray] = {}
        self._ints: dict[str, int] = {}

    def put_float_array(self, key: str, values: Any) -> None:
        """Store a copy of a numeric sequence as a float64 array"""
        self._float_arrays[key] = np.array(values, dtype=np.float64)

    def get_float_array(self, key: str) -> np.ndarray:
        """Returns a copy of the stored float array, KeyError if missing"""
        return self._float_arrays[key].copy()

    def put_int(self, key: str, value: int) -> None:
        self._ints[key] = int(value)

    def get_int(self, key: str) -> int:
        return self._ints[key]

    def __contains__(self, key: object) -> bool:
        return key in self._float_arrays or key in self._ints

    def to_dict(self) -> dict[str, Any]:
        """Convert bundle to a JSON friendly dictionary"""
        return {
            "float_arrays": {key: value.tolist() for key, value in self._float_arrays.items()},
            "ints": dict(self._ints),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StateBundle":
        bundle = cls()
        for key, values in data.get("float_arrays", {}).items():
            bundle.put_float_array(key, values)
        for key, value in data.get("ints", {}).items():
            bundle.put_int(key, value)
        return bundle

    def save_to_file(self, filepath: str | Path) -> None:
        """Save bundle to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str | Path) -> "StateBundle":
        """Load bundle from a JSON file"""
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"State file not found: {filepath}")

        with open(path) as f:
            return cls.from_dict(json.load(f))
