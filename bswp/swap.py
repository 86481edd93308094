'''Rule folding and in-memory swapping utilities (pure)'''
# --------------------
# --------------------
def apply_swaps(swaps, position, value):
    '''Fold a ruleset over a single byte.

    Rules are applied in order, each matching rule transforming the output of
    the previous ones: a later rule may override bits set by an earlier rule.

    :param swaps: ordered ruleset
    :param position: absolute position of the byte
    :param value: input byte
    :type swaps: sequence(tuple(:class:`bswp.patterns.GenericPattern`, :class:`bswp.localities.GenericLocality`))
    :type position: int
    :type value: int

    :return: the swapped byte
    :rtype: int
    '''
    for pattern, locality in swaps:
        if locality.applies(position):
            value = pattern.swap(value)
    return value
# --------------------
def iter_swap(swaps, source):
    '''Returns an iterator on the swapped bytes of :code:`source`.

    Bytes are swapped lazily, on demand. :code:`source` is never modified and
    the iterator can only be consumed once.

    .. code-block:: python

        swaps = [(BytePattern(0x42, 0xFF), Locality(2, 1))]
        bytes(iter_swap(swaps, b'AAAA'))    # b'ABAB'

    :param swaps: ordered ruleset
    :param source: input bytes
    :type source: bytes or bytearray or iterable(int)
    :rtype: generator(int)
    '''
    swaps = tuple(swaps)
    for position, value in enumerate(source):
        yield apply_swaps(swaps, position, value)
# --------------------
def swap_bytes(swaps, source):
    '''Swap an in-memory buffer at once.

    :rtype: bytes
    '''
    return bytes(iter_swap(swaps, source))
# --------------------
