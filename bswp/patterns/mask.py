'''Module for value/mask byte patterns'''
# --------------------
from bswp.errors import check_integer
from .core import GenericPattern
# --------------------
class BytePattern(GenericPattern):
    '''Pattern setting the bits of a byte to the bits of :code:`value`, according to :code:`mask`.

    Masked bits are taken from :code:`value`, unmasked bits are kept from the
    input byte.

    .. code-block:: python

        BytePattern(0xFF, 0xF0).swap(0x00)                # 0xF0
        BytePattern(0b10101111, 0b10011010).swap(0x00)    # 0b10001010

    :param value: bits to force
    :param mask: bits of the byte to replace
    :type value: int
    :type mask: int
    :raises InvalidConfiguration: if :code:`value` or :code:`mask` is not a byte
    '''

    key = 'mask'

    def __init__(self, value, mask=0xFF):
        self._value = check_integer('pattern value', value, 0, 0xFF)
        self._mask = check_integer('pattern mask', mask, 0, 0xFF)

    @property
    def value(self):
        return self._value

    @property
    def mask(self):
        return self._mask

    def swap(self, value):
        return (self._mask & self._value) | (~self._mask & value & 0xFF)

    def to_dict(self):
        return {'type': self.key, 'value': self._value, 'mask': self._mask}
# --------------------
