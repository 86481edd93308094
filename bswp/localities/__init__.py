"""Bswp classes for selecting the stream positions a pattern applies to"""

from .core import GenericLocality, NowhereLocality
from .periodic import Locality
from .positions import PositionsLocality
