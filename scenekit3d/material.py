"""Material template (.mtl) loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from scenekit3d.vectors import Vector3

DEFAULT_TEXTURE = "white1x1.png"


@dataclass
class MaterialData:
    """Texture path and UV transform of a material."""

    texture_file_path: str = ""
    uv_scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    uv_offset: Vector3 = field(default_factory=Vector3)
    uv_translate: Vector3 = field(default_factory=Vector3)


def _read_components(tokens: Iterator[str], target: Vector3) -> bool:
    """Read up to three floats into target; False if the stream failed."""
    for axis in ("x", "y", "z"):
        token: Optional[str] = next(tokens, None)
        if token is None:
            return False
        try:
            setattr(target, axis, float(token))
        except ValueError:
            setattr(target, axis, 0.0)
            return False
    return True


def _parse_map_kd(tokens: List[str], material: MaterialData) -> None:
    scale = Vector3(1.0, 1.0, 1.0)
    offset = Vector3(0.0, 0.0, 0.0)
    translate = Vector3(0.0, 0.0, 0.0)
    targets = {"s": scale, "o": offset, "t": translate}

    stream = iter(tokens)
    for token in stream:
        if token.startswith("-"):
            target = targets.get(token[1:])
            if target is not None and not _read_components(stream, target):
                break
        else:
            material.texture_file_path = token

    material.uv_scale = scale
    material.uv_offset = offset
    material.uv_translate = translate


def load_material_template_file(directory_path: str, filename: str) -> MaterialData:
    """Read the map_Kd entry of a material file.

    Falls back to the plain white texture when none is named. Raises
    OSError if the file cannot be opened.
    """
    material = MaterialData()
    path = Path(directory_path) / filename
    with path.open(encoding="utf-8") as handle:
        for line in handle:
            words = line.split()
            if words and words[0] == "map_Kd":
                _parse_map_kd(words[1:], material)

    if not material.texture_file_path:
        material.texture_file_path = DEFAULT_TEXTURE
    return material