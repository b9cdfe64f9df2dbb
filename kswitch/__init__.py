"""Switch KDE Plasma, its wallpaper and Konsole between light and dark themes."""

__version__ = "1.0.0"
__all__ = ["__version__"]