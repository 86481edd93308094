'''Module for periodic localities'''
# --------------------
from bswp.errors import check_integer
from .core import GenericLocality
# --------------------
class Locality(GenericLocality):
    '''Locality selecting every :code:`periodicity` bytes once :code:`offset` is reached.

    Position :code:`p` is selected iff :code:`p >= offset`,
    :code:`(p - offset) % periodicity == 0` and, when a :code:`limit` is
    set, fewer than :code:`limit` positions were selected before it.

    .. code-block:: python

        locality = Locality(2, 3)   # every 2 bytes for position >= 3
        locality.applies(3)         # True
        locality.applies(4)         # False

    :param periodicity: distance between two selected positions
    :param offset: first selectable position
    :param limit: maximum number of selected positions, unbounded if None
    :type periodicity: int
    :type offset: int
    :type limit: int or None
    :raises InvalidConfiguration: on a null periodicity, a negative offset or a non positive limit
    '''

    key = 'periodic'

    def __init__(self, periodicity=1, offset=0, limit=None):
        self._periodicity = check_integer('periodicity', periodicity, 1)
        self._offset = check_integer('offset', offset, 0)
        self._limit = None if limit is None else check_integer('limit', limit, 1)

    @property
    def periodicity(self):
        return self._periodicity

    @property
    def offset(self):
        return self._offset

    @property
    def limit(self):
        return self._limit

    def applies(self, position):
        if position < self._offset:
            return False
        index, rem = divmod(position - self._offset, self._periodicity)
        return rem == 0 and (self._limit is None or index < self._limit)

    def to_dict(self):
        return {'type': self.key, 'periodicity': self._periodicity,
                'offset': self._offset, 'limit': self._limit}
# --------------------
