from .core import BerryApp

__all__ = ["BerryApp"]
