# -------------------------------------
import pytest
from bswp import InvalidConfiguration
from bswp.patterns import *
# -------------------------------------
SampleBytes = (0x00, 0x01, 0x0f, 0x41, 0x5a, 0x80, 0xa5, 0xf0, 0xfe, 0xff)
SampleMasks = (0x00, 0x01, 0x0f, 0x3c, 0x80, 0x9a, 0xf0, 0xff)
# -------------------------------------
def mask_formula(value, mask):
    pattern = BytePattern(value, mask)
    for b in SampleBytes:
        assert pattern.swap(b) == ((mask & value) | (~mask & b)) & 0xff
# -------------------------------------
for mask in SampleMasks:
    for value in (0x00, 0x42, 0xaf, 0xff):
        exec(f'test_mask_formula_{value:02x}_{mask:02x} = lambda : mask_formula({value}, {mask})')
# -------------------------------------
def test_mask_nibbles():
    assert BytePattern(0xff, 0x0f).swap(0x00) == 0x0f
    assert BytePattern(0xff, 0xf0).swap(0x00) == 0xf0
    assert BytePattern(0b10101111, 0b10011010).swap(0b00000000) == 0b10001010
# -------------------------------------
def test_full_mask_replaces():
    pattern = BytePattern(0x42, 0xff)
    assert all(pattern.swap(b) == 0x42 for b in range(256))
# -------------------------------------
def test_empty_mask_preserves():
    pattern = BytePattern(0x42, 0x00)
    assert all(pattern.swap(b) == b for b in range(256))
# -------------------------------------
def test_default_mask_replaces():
    assert BytePattern(0x17).mask == 0xff
    assert BytePattern(0x17).swap(0xaa) == 0x17
# -------------------------------------
def test_bitflip():
    pattern = BitflipPattern(0x0f)
    assert pattern.swap(0x00) == 0x0f
    assert pattern.swap(0xff) == 0xf0
    assert all(pattern.swap(pattern.swap(b)) == b for b in range(256))
# -------------------------------------
def test_nopattern():
    assert all(NoPattern().swap(b) == b for b in range(256))
# -------------------------------------
def test_generic_pattern_noswap():
    with pytest.raises(NotImplementedError):
        GenericPattern().swap(0)
# -------------------------------------
@pytest.mark.parametrize('value, mask', [(-1, 0xff), (0x100, 0xff), (0x42, 0x100), (0x42, -1), ('0x42', 0xff), (0x42, None), (True, 0xff)])
def test_invalid_pattern(value, mask):
    with pytest.raises(InvalidConfiguration):
        BytePattern(value, mask)
# -------------------------------------
def test_invalid_bitflip():
    with pytest.raises(InvalidConfiguration):
        BitflipPattern(0x1ff)
# -------------------------------------
def test_pattern_value_semantics():
    assert BytePattern(0x42, 0xff) == BytePattern(0x42, 0xff)
    assert BytePattern(0x42, 0xff) != BytePattern(0x42, 0xf0)
    assert BytePattern(0x0f, 0x0f) != BitflipPattern(0x0f)
    assert len({BytePattern(1, 2), BytePattern(1, 2), NoPattern(), NoPattern()}) == 2
    assert repr(BytePattern(0x42, 0xff)) == 'BytePattern(value=0x42, mask=0xff)'
# -------------------------------------
def test_pattern_readonly():
    pattern = BytePattern(0x42, 0xff)
    with pytest.raises(AttributeError):
        pattern.value = 0x00
    assert pattern.to_dict() == {'type': 'mask', 'value': 0x42, 'mask': 0xff}
# -------------------------------------
