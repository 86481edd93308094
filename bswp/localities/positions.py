'''Module for localities built from explicit positions'''
# --------------------
from bswp.errors import InvalidConfiguration, check_integer
from .core import GenericLocality
# --------------------
class PositionsLocality(GenericLocality):
    '''Locality selecting a given set of absolute positions.

    :param positions: positions to select
    :type positions: iterable(int)
    :raises InvalidConfiguration: if a position is not a non-negative integer
    '''

    key = 'positions'

    def __init__(self, positions):
        if isinstance(positions, (str, bytes)) or not hasattr(positions, '__iter__'):
            raise InvalidConfiguration('positions must be a collection of integers', positions)
        self._positions = frozenset(check_integer('position', p, 0) for p in positions)

    @property
    def positions(self):
        return self._positions

    def applies(self, position):
        return position in self._positions

    def to_dict(self):
        return {'type': self.key, 'positions': sorted(self._positions)}
# --------------------
