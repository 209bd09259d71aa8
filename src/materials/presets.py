# materials/presets.py
from core.vector import Vector3
from materials.material import Material, MaterialKind

class MattePresets:
    """Predefined diffuse-only materials."""

    @staticmethod
    def red() -> Material:
        return Material(Vector3(1.0, 0.0, 0.0), MaterialKind.MATTE)

    @staticmethod
    def green() -> Material:
        return Material(Vector3(0.2, 0.8, 0.2), MaterialKind.MATTE)

    @staticmethod
    def white() -> Material:
        return Material(Vector3(0.9, 0.9, 0.9), MaterialKind.MATTE)

    @staticmethod
    def gray() -> Material:
        return Material(Vector3(0.5, 0.5, 0.5), MaterialKind.MATTE)

class GlossyPresets:
    """Predefined materials with a specular highlight."""

    @staticmethod
    def blue_plastic() -> Material:
        return Material(Vector3(0.1, 0.2, 0.9), MaterialKind.GLOSSY)

    @staticmethod
    def yellow_plastic() -> Material:
        return Material(Vector3(0.9, 0.8, 0.1), MaterialKind.GLOSSY)

class MirrorPresets:
    """Perfect mirrors. The color is not used when shading."""

    @staticmethod
    def mirror() -> Material:
        return Material(Vector3(1.0, 1.0, 1.0), MaterialKind.REFLECTIVE)
