"""Version information for cloudinary-kit."""

__version__ = "0.1.0"
