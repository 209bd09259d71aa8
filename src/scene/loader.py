# scene/loader.py
"""
Reader for the plain-text scene format, one primitive per line:

    sphere,(cx cy cz),radius,(r g b),kind,id
    triangle,(ax ay az),(bx by bz),(cx cy cz),(r g b),kind,id

`kind` is matte, glossy or refl. The id may be left empty to have one
assigned. Blank lines and lines starting with '#' are ignored.
"""
import logging
import os
from typing import Iterable, List, Optional

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import SceneError, World
from materials.material import Material, MaterialKind

logger = logging.getLogger(__name__)

def parse_vector(text: str, line_number: int = 0) -> Vector3:
    """Parse '(x y z)' into a Vector3."""
    text = text.strip()
    if not (text.startswith("(") and text.endswith(")")):
        raise SceneError(f"line {line_number}: expected '(x y z)', got {text!r}")
    parts = text[1:-1].split()
    if len(parts) != 3:
        raise SceneError(f"line {line_number}: expected 3 components, got {text!r}")
    try:
        return Vector3(*(float(p) for p in parts))
    except ValueError:
        raise SceneError(f"line {line_number}: invalid number in {text!r}") from None

def _parse_float(text: str, line_number: int) -> float:
    try:
        return float(text)
    except ValueError:
        raise SceneError(f"line {line_number}: invalid number {text!r}") from None

def _parse_id(text: str, line_number: int) -> Optional[int]:
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise SceneError(f"line {line_number}: invalid id {text!r}") from None

def _expect_fields(fields: List[str], count: int, line_number: int):
    # The id column is optional
    if len(fields) == count - 1:
        fields.append("")
    if len(fields) != count:
        raise SceneError(f"line {line_number}: {fields[0]} needs {count - 1} fields, got {len(fields) - 1}")

def parse_scene(lines: Iterable[str], world: Optional[World] = None) -> World:
    """
    Build a World from scene-file lines. Unknown record types are skipped
    with a warning; malformed records raise SceneError.
    """
    if world is None:
        world = World()

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        logger.debug("line %d: %s", line_number, line)
        fields = [f.strip() for f in line.split(",")]
        record = fields[0].lower()

        try:
            if record == "sphere":
                _expect_fields(fields, 6, line_number)
                material = Material(parse_vector(fields[3], line_number), MaterialKind.parse(fields[4]))
                world.add(Sphere(parse_vector(fields[1], line_number),
                                 _parse_float(fields[2], line_number),
                                 material,
                                 _parse_id(fields[5], line_number)))
            elif record == "triangle":
                _expect_fields(fields, 7, line_number)
                material = Material(parse_vector(fields[4], line_number), MaterialKind.parse(fields[5]))
                world.add(Triangle(parse_vector(fields[1], line_number),
                                   parse_vector(fields[2], line_number),
                                   parse_vector(fields[3], line_number),
                                   material,
                                   _parse_id(fields[6], line_number)))
            else:
                logger.warning("line %d: invalid record type %r, skipped", line_number, fields[0])
        except SceneError:
            raise
        except ValueError as e:
            raise SceneError(f"line {line_number}: {e}") from e

    logger.info("Loaded scene with %d spheres and %d triangles",
                len(world.spheres), len(world.triangles))
    return world

def load_scene(path: str) -> World:
    """
    Load a scene file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SceneError: If a record is malformed
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Scene file not found: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        return parse_scene(fh)
