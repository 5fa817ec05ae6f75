from .field import NoiseField, new_field

__all__ = ["NoiseField", "new_field"]
