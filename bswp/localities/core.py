'''Base classes for building localities, that decide which byte positions to swap'''
# --------------------
# --------------------
class GenericLocality:
    '''Generic class for selecting byte positions.

    Positions are absolute: counted from the start of the stream, whatever
    the buffering of the stream is.

    :param key: identifier of the locality type in rule files
    :type key: str
    '''

    key = None

    def applies(self, position):
        '''Check whether the byte at :code:`position` is selected.

        :param position: absolute position of the byte
        :type position: int
        :return: True iff the locality selects :code:`position`
        :rtype: bool
        '''
        raise NotImplementedError(self)

    def to_dict(self):
        '''Obtain a serializable description of the locality.

        :rtype: dict
        '''
        return {'type': self.key}

    def __eq__(self, other):
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple((k, tuple(v) if isinstance(v, list) else v) for k, v in sorted(self.to_dict().items())))

    def __repr__(self):
        args = ', '.join(f'{k}={v!r}' for k, v in self.to_dict().items() if k != 'type')
        return f'{type(self).__name__}({args})'
# --------------------
class NowhereLocality(GenericLocality):
    '''Utility locality selecting no position whatsoever.'''

    key = 'nowhere'

    def applies(self, position):
        return False
# --------------------
