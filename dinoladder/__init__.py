"""A ladder-climbing arcade game on a simulated 128x160 RGB565 screen."""

__version__ = "0.1.0"
__all__ = ["__version__"]