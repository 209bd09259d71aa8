import pytest

from core.config import QUALITY_LEVELS, RenderConfig
from core.vector import Vector3


def test_defaults():
    config = RenderConfig()
    assert config.resolution == 512
    assert config.reflection_depth == 10
    assert config.image_size == 2.0
    assert config.ambient == 0.2
    assert config.specular_exponent == 11.0
    assert config.light == Vector3(-3, 8, -6)
    assert config.eye_position == Vector3(0, 0, 0)
    assert config.backend == "numba"


def test_pixel_width():
    assert RenderConfig(resolution=64).pixel_width == 2.0 / 64


@pytest.mark.parametrize("kwargs", [
    {"resolution": 0},
    {"reflection_depth": -1},
    {"image_size": 0},
    {"backend": "cuda"},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        RenderConfig(**kwargs)


def test_quality_levels():
    for name, preset in QUALITY_LEVELS.items():
        config = RenderConfig.from_quality(name)
        assert config.resolution == preset["resolution"]
        assert config.reflection_depth == preset["reflection_depth"]


def test_quality_overrides():
    config = RenderConfig.from_quality("draft", resolution=32, backend="python")
    assert config.resolution == 32
    assert config.reflection_depth == QUALITY_LEVELS["draft"]["reflection_depth"]
    assert config.backend == "python"


def test_unknown_quality():
    with pytest.raises(ValueError):
        RenderConfig.from_quality("ultra")
