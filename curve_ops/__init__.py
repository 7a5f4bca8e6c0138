from .curve import Curve
from .modular import modulo_inverse, modulo_power
from .point import INFINITY, Point

__all__ = ["Curve", "INFINITY", "Point", "modulo_inverse", "modulo_power"]
