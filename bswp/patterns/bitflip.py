'''Module for bitflip byte patterns'''
# --------------------
from bswp.errors import check_integer
from .core import GenericPattern
# --------------------
class BitflipPattern(GenericPattern):
    '''Pattern flipping the bits of a byte according to the given mask.

    :param mask: bits to flip
    :type mask: int
    :raises InvalidConfiguration: if :code:`mask` is not a byte
    '''

    key = 'bitflip'

    def __init__(self, mask):
        self._mask = check_integer('bitflip mask', mask, 0, 0xFF)

    @property
    def mask(self):
        return self._mask

    def swap(self, value):
        return (value ^ self._mask) & 0xFF

    def to_dict(self):
        return {'type': self.key, 'mask': self._mask}
# --------------------
