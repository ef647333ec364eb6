from .renderer import raster_from_image, raster_to_image, show_raster

__all__ = ["raster_from_image", "raster_to_image", "show_raster"]
