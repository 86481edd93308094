'''Byte swap IO utils, for file-like data'''
# --------------------
from bswp.errors import check_integer
from bswp.swap import apply_swaps
# --------------------
BUFFER_SIZE = 8000
# --------------------
def _read_chunk(reader, buffer):
    if hasattr(reader, 'readinto'):
        return reader.readinto(buffer) or 0
    data = reader.read(len(buffer)) or b''
    buffer[:len(data)] = data
    return len(data)
# --------------------
def _write_all(writer, data):
    view = memoryview(data)
    while view:
        written = writer.write(view)
        # None: writer without short-write reporting, assumed complete
        if written is None:
            break
        if written == 0:
            raise OSError(f'writer accepted no bytes ({len(view)} bytes left)')
        view = view[written:]
# --------------------
def swap_io(reader, writer, swaps, buffer_size=BUFFER_SIZE):
    '''For each byte in :code:`reader` compute the ruleset and write the result to :code:`writer`.

    Data is moved through a :code:`buffer_size` buffer: each chunk is read,
    swapped in place and fully written before the next one is read. Byte
    positions are counted from the first byte read, across chunks.

    Please note that :code:`swap_io` neither resets the :code:`reader`/:code:`writer`
    cursors before nor after the transfer.

    Errors raised by :code:`reader` or :code:`writer` are propagated as is;
    :code:`writer` then holds the chunks written so far.

    .. code-block:: python

        reader, writer = io.BytesIO(b'ABCD'), io.BytesIO()
        swap_io(reader, writer, [(BytePattern(0x42, 0xFF), Locality(2, 0))])    # 4
        writer.getvalue()                                                        # b'BBBD'

    :param reader: source of bytes, with :code:`readinto` (or :code:`read`)
    :param writer: sink of bytes, with :code:`write`
    :param swaps: ordered ruleset
    :param buffer_size: size of the transfer buffer
    :type swaps: sequence(tuple(:class:`bswp.patterns.GenericPattern`, :class:`bswp.localities.GenericLocality`))
    :type buffer_size: int

    :return: number of bytes read from :code:`reader` and written to :code:`writer`
    :rtype: int
    :raises InvalidConfiguration: if :code:`buffer_size` is not a positive integer
    :raises OSError: on read or write failure
    '''
    check_integer('buffer size', buffer_size, 1)
    swaps = tuple(swaps)
    buffer = bytearray(buffer_size)
    position = 0
    while True:
        size = _read_chunk(reader, buffer)
        if size == 0:
            break
        for index in range(size):
            buffer[index] = apply_swaps(swaps, position + index, buffer[index])
        position += size
        _write_all(writer, buffer[:size])
    return position
# --------------------
