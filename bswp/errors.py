'''Errors raised by bswp'''
# --------------------
class InvalidConfiguration(ValueError):
    '''Raised when a pattern, a locality or a ruleset is structurally invalid.

    Always raised when the faulty object is built or loaded, never while
    swapping bytes.

    :param reason: description of the invalid parameter
    :param value: the offending value, if any
    :type reason: str
    '''

    def __init__(self, reason, value=None):
        super().__init__(reason if value is None else f'{reason}: {value!r}')
        self.reason = reason
        self.value = value
# --------------------
def check_integer(name, value, minimum=None, maximum=None):
    '''Validate an integer rule parameter.

    :param name: parameter name, for error reporting
    :param value: value to check
    :param minimum: lowest accepted value, if any
    :param maximum: highest accepted value, if any
    :type name: str
    :type minimum: int or None
    :type maximum: int or None

    :return: the checked value
    :rtype: int
    :raises InvalidConfiguration: if :code:`value` is not an integer in range
    '''
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f'{name} must be an integer', value)
    if minimum is not None and value < minimum:
        raise InvalidConfiguration(f'{name} must be >= {minimum}', value)
    if maximum is not None and value > maximum:
        raise InvalidConfiguration(f'{name} must be <= {maximum}', value)
    return value
# --------------------
