# materials/material.py
import logging
from enum import IntEnum

from core.vector import Vector3

logger = logging.getLogger(__name__)

class MaterialKind(IntEnum):
    """
    The three surface behaviors. Integer values are what the compiled
    backend stores in its per-primitive kind arrays.
    """
    MATTE = 0
    GLOSSY = 1
    REFLECTIVE = 2

    @classmethod
    def parse(cls, name: str) -> "MaterialKind":
        """
        Maps a scene-file material name to a kind. Unknown names are
        treated as matte.
        """
        key = name.strip().lower()
        if key == "matte":
            return cls.MATTE
        if key == "glossy":
            return cls.GLOSSY
        if key in ("refl", "reflective"):
            return cls.REFLECTIVE
        logger.warning("Unknown material kind %r, using matte", name)
        return cls.MATTE

class Material:
    """
    A surface color plus one of the three fixed behaviors. Attached by
    value to each primitive.
    """
    __slots__ = ("color", "kind")

    def __init__(self, color: Vector3, kind: MaterialKind = MaterialKind.MATTE):
        self.color = color
        self.kind = MaterialKind(kind)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.color == other.color and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((self.color, self.kind))

    def __repr__(self) -> str:
        return f"Material({self.color!r}, {self.kind.name})"

# Neutral material carried by the no-hit record
NULL_MATERIAL = Material(Vector3(0, 0, 0), MaterialKind.MATTE)
