"""Bswp classes for transforming the value of a single byte"""

from .core import GenericPattern, NoPattern
from .mask import BytePattern
from .bitflip import BitflipPattern
