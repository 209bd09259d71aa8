# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    A fixed pinhole camera looking down -z. Pixels of an N x N image are
    mapped onto a square image plane `image_size` world units wide, placed
    `plane_distance` in front of the eye. Row 0 is the top of the image.
    """
    def __init__(self, position: Vector3, resolution: int,
                 image_size: float = 2.0, plane_distance: float = 2.0):
        if resolution <= 0:
            raise ValueError(f"resolution must be positive, got {resolution}")
        self.position = position
        self.resolution = resolution
        self.image_size = image_size
        self.plane_distance = plane_distance
        self.pixel_width = image_size / resolution

    @classmethod
    def from_config(cls, config) -> "Camera":
        return cls(config.eye_position, config.resolution,
                   config.image_size, config.plane_distance)

    def plane_point(self, x: float, y: float) -> Vector3:
        """Center of pixel (x, y) on the image plane, relative to the eye."""
        half = self.image_size / 2.0
        img_x = (x * self.pixel_width) + (self.pixel_width / 2.0) - half
        img_y = -((y * self.pixel_width) + (self.pixel_width / 2.0) - half)
        return Vector3(img_x, img_y, -self.plane_distance)

    def get_ray(self, x: float, y: float) -> Ray:
        """Primary ray from the eye through the center of pixel (x, y)."""
        return Ray(self.position, self.plane_point(x, y).normalize())
