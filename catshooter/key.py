"""Motion key poses, key frames and motion descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

MAX_KEY = 20
MAX_KEY_INFO = 10


@dataclass
class KeyPose:
    """Position and rotation of one part at a key."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0
    rot_x: float = 0.0
    rot_y: float = 0.0
    rot_z: float = 0.0

    def get_pos(self, axis: str) -> float:
        """Position on axis 'x', 'y' or 'z' (either case); 0.0 otherwise."""
        return {"X": self.pos_x, "Y": self.pos_y, "Z": self.pos_z}.get(
            axis.upper() if len(axis) == 1 else "", 0.0
        )

    def get_rot(self, axis: str) -> float:
        """Rotation about axis 'x', 'y' or 'z' (either case); 0.0 otherwise."""
        return {"X": self.rot_x, "Y": self.rot_y, "Z": self.rot_z}.get(
            axis.upper() if len(axis) == 1 else "", 0.0
        )


class KeyFrame:
    """Part poses for one key and the number of frames it takes."""

    def __init__(self, frames: int = 0) -> None:
        self.frames = frames
        self._keys: List[Optional[KeyPose]] = [None] * MAX_KEY

    @property
    def keys(self) -> Tuple[Optional[KeyPose], ...]:
        return tuple(self._keys)

    def set_keys(self, keys: Iterable[Optional[KeyPose]]) -> None:
        """Store the given poses; None entries leave the slot unchanged."""
        for slot, pose in zip(range(MAX_KEY), keys):
            if pose is not None:
                self._keys[slot] = pose

    def clear(self) -> None:
        """Drop all poses."""
        self._keys = [None] * MAX_KEY


class MotionInfo:
    """A motion: whether it loops, its key count and its key frames."""

    def __init__(self, loop: bool = False, num_keys: int = 0) -> None:
        self.loop = loop
        self.num_keys = num_keys
        self._key_frames: List[Optional[KeyFrame]] = [None] * MAX_KEY_INFO

    def set_key_frames(self, key_frames: Iterable[Optional[KeyFrame]]) -> None:
        """Replace every key-frame slot; missing entries become None."""
        frames = list(key_frames)[:MAX_KEY_INFO]
        self._key_frames = frames + [None] * (MAX_KEY_INFO - len(frames))

    def key_frame(self, index: int) -> Optional[KeyFrame]:
        if not 0 <= index < MAX_KEY_INFO:
            raise IndexError(f"key frame index {index} out of range")
        return self._key_frames[index]

    def clear(self) -> None:
        """Clear and drop every key frame."""
        for frame in self._key_frames:
            if frame is not None:
                frame.clear()
        self._key_frames = [None] * MAX_KEY_INFO