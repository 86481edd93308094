"""Bswp: byte swapping using masked patterns at selected stream positions"""

from .errors import InvalidConfiguration
from .patterns import GenericPattern, BytePattern, BitflipPattern, NoPattern
from .localities import GenericLocality, Locality, PositionsLocality, NowhereLocality
from .swap import apply_swaps, iter_swap, swap_bytes
from .io import BUFFER_SIZE, swap_io
from .rules import load_rules, load_rules_file, dump_rules, parse_expression
from .core import SwapOptions, Swapper

from .rules import Patterns as __Patterns
from .rules import Localities as __Localities
PatternKeys = __Patterns.keys()
LocalityKeys = __Localities.keys()

__version__ = '0.3.0'

__all__ = [
    'InvalidConfiguration',
    'GenericPattern', 'BytePattern', 'BitflipPattern', 'NoPattern',
    'GenericLocality', 'Locality', 'PositionsLocality', 'NowhereLocality',
    'apply_swaps', 'iter_swap', 'swap_bytes',
    'BUFFER_SIZE', 'swap_io',
    'load_rules', 'load_rules_file', 'dump_rules', 'parse_expression',
    'SwapOptions', 'Swapper',
    'PatternKeys', 'LocalityKeys',
]
