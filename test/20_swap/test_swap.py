# -------------------------------------
import types
from bswp import BytePattern, BitflipPattern, Locality, PositionsLocality, NowhereLocality
from bswp.swap import apply_swaps, iter_swap, swap_bytes
# -------------------------------------
Always = Locality()
SetAll = (BytePattern(0xff, 0xff), Always)
ClearAll = (BytePattern(0x00, 0xff), Always)
# -------------------------------------
def test_iter_swap_odd_positions():
    swaps = [(BytePattern(0x42, 0xff), Locality(2, 1))]
    swapped = iter_swap(swaps, bytes([0x41, 0x41, 0x41, 0x41]))
    assert list(swapped) == [0x41, 0x42, 0x41, 0x42]
# -------------------------------------
def test_iter_swap_is_lazy():
    consumed = []
    def source():
        for b in (0x41, 0x41, 0x41):
            consumed.append(b)
            yield b
    swapped = iter_swap([SetAll], source())
    assert isinstance(swapped, types.GeneratorType)
    assert consumed == []
    assert next(swapped) == 0xff
    assert consumed == [0x41]
# -------------------------------------
def test_iter_swap_single_pass():
    swapped = iter_swap([SetAll], b'abc')
    assert len(list(swapped)) == 3
    assert list(swapped) == []
# -------------------------------------
def test_iter_swap_keeps_source():
    source = bytearray(b'abcdef')
    assert swap_bytes([ClearAll], source) == bytes(6)
    assert source == bytearray(b'abcdef')
# -------------------------------------
def test_last_rule_wins():
    data = bytes(range(64))
    assert swap_bytes([SetAll, ClearAll], data) == bytes(64)
    assert swap_bytes([ClearAll, SetAll], data) == b'\xff' * 64
# -------------------------------------
def test_fold_partial_masks():
    swaps = [(BytePattern(0xf0, 0xf0), Always), (BytePattern(0x05, 0x0f), Always)]
    assert apply_swaps(swaps, 0, 0x00) == 0xf5
    swaps = [(BytePattern(0xff, 0xff), Always), (BitflipPattern(0x01), Always)]
    assert apply_swaps(swaps, 0, 0x00) == 0xfe
# -------------------------------------
def test_fold_skips_unmatched_rules():
    swaps = [(BytePattern(0x01), PositionsLocality([0])),
             (BytePattern(0x02), PositionsLocality([1])),
             (BytePattern(0x03), NowhereLocality())]
    assert swap_bytes(swaps, bytes(3)) == bytes([0x01, 0x02, 0x00])
# -------------------------------------
def test_empty_inputs():
    assert swap_bytes([], b'abc') == b'abc'
    assert swap_bytes([SetAll], b'') == b''
# -------------------------------------
def test_iter_swap_copies_ruleset():
    swaps = [SetAll]
    swapped = iter_swap(swaps, b'ab')
    assert next(swapped) == 0xff
    swaps.append(ClearAll)
    assert next(swapped) == 0xff
# -------------------------------------
