"""Persistent editor settings stored in a fixed-size binary record."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from stitchpaint.geometry import Vec2

DEFAULT_CONFIG_PATH = "config.bin"
DEFAULT_FILE_PATH = "Untitled.txt"
DEFAULT_SCALE = 20.0
FILE_PATH_LENGTH = 100

# char path[100], 4 bytes of padding, double scale, double camera x, double camera y
_RECORD = struct.Struct("<%ds4xddd" % FILE_PATH_LENGTH)
CONFIG_SIZE = _RECORD.size

StrPath = Union[str, "PathLike[str]"]


@dataclass
class PaintConfig:
    """Settings remembered between sessions."""

    current_file_path: str = DEFAULT_FILE_PATH
    scale: float = DEFAULT_SCALE
    camera_pos: Vec2 = field(default_factory=Vec2)


def pack_config(config: PaintConfig) -> bytes:
    """Serialise a config to its binary record."""
    path = config.current_file_path.encode("utf-8")
    if len(path) >= FILE_PATH_LENGTH:
        raise ValueError(
            f"file path is {len(path)} bytes; at most {FILE_PATH_LENGTH - 1} fit"
        )
    return _RECORD.pack(path, config.scale, config.camera_pos.x, config.camera_pos.y)


def unpack_config(data: bytes) -> PaintConfig:
    """Parse a binary record produced by pack_config."""
    if len(data) != CONFIG_SIZE:
        raise ValueError(f"config record must be {CONFIG_SIZE} bytes, got {len(data)}")
    raw_path, scale, cam_x, cam_y = _RECORD.unpack(data)
    path = raw_path.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return PaintConfig(path, scale, Vec2(cam_x, cam_y))


def load_config(path: StrPath = DEFAULT_CONFIG_PATH) -> PaintConfig:
    """Read the config file, falling back to defaults when it cannot be opened."""
    try:
        with open(path, "rb") as fh:
            data = fh.read(CONFIG_SIZE)
    except OSError:
        return PaintConfig()
    return unpack_config(data)


def save_config(config: PaintConfig, path: StrPath = DEFAULT_CONFIG_PATH) -> None:
    """Write the config to a file."""
    data = pack_config(config)
    with open(path, "wb") as fh:
        fh.write(data)