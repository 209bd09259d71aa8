# core/config.py
from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.vector import Vector3

BACKENDS = ("numba", "python")

# Named presets, selectable with RenderConfig.from_quality()
QUALITY_LEVELS = {
    "draft": {"resolution": 128, "reflection_depth": 2},
    "balanced": {"resolution": 512, "reflection_depth": 10},
    "high": {"resolution": 1024, "reflection_depth": 16},
}

@dataclass
class RenderConfig:
    """Configuration for a single render."""
    resolution: int = 512            # pixels per side of the square image
    reflection_depth: int = 10       # maximum mirror bounces per pixel
    image_size: float = 2.0          # world-space width of the image plane
    plane_distance: float = 2.0      # distance from the eye to the image plane
    ambient: float = 0.2             # diffuse floor for shadowed or back-facing points
    specular_exponent: float = 11.0
    light_position: Tuple[float, float, float] = (-3.0, 8.0, -6.0)
    eye: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    backend: str = "numba"

    # Cached vector forms of light_position and eye
    light: Optional[Vector3] = field(init=False, repr=False, default=None)
    eye_position: Optional[Vector3] = field(init=False, repr=False, default=None)

    def __post_init__(self):
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")
        if self.reflection_depth < 0:
            raise ValueError(f"reflection_depth must be >= 0, got {self.reflection_depth}")
        if self.image_size <= 0 or self.plane_distance <= 0:
            raise ValueError("image_size and plane_distance must be positive")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}, expected one of {BACKENDS}")
        self.light_position = tuple(float(c) for c in self.light_position)
        self.eye = tuple(float(c) for c in self.eye)
        self.light = Vector3(*self.light_position)
        self.eye_position = Vector3(*self.eye)

    @property
    def pixel_width(self) -> float:
        return self.image_size / self.resolution

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderConfig":
        """
        Build a config from one of the QUALITY_LEVELS presets; keyword
        arguments override individual settings.
        """
        try:
            preset = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}") from None
        params = dict(preset)
        params.update(overrides)
        return cls(**params)
