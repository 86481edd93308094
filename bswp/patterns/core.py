'''Base classes for building byte patterns'''
# --------------------
# --------------------
class GenericPattern:
    '''Generic class for transforming a byte value.

    A pattern only sees the value of the byte, never its position: which bytes
    a pattern applies to is decided by a locality.

    :param key: identifier of the pattern type in rule files
    :type key: str
    '''

    key = None

    def swap(self, value):
        '''Returns :code:`value` with the pattern applied.

        :param value: input byte
        :type value: int
        :return: output byte
        :rtype: int
        '''
        raise NotImplementedError(self)

    def to_dict(self):
        '''Obtain a serializable description of the pattern.

        :rtype: dict(str, int)
        '''
        return {'type': self.key}

    def __eq__(self, other):
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.to_dict().items())))

    def __repr__(self):
        args = ', '.join(f'{k}=0x{v:02x}' for k, v in self.to_dict().items() if k != 'type')
        return f'{type(self).__name__}({args})'
# --------------------
class NoPattern(GenericPattern):
    '''Utility pattern that leaves every byte untouched.'''

    key = 'none'

    def swap(self, value):
        return value
# --------------------
