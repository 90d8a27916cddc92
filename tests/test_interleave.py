import pytest

from zdex.dimensions import BitString, FixedWidth, UInt8, UInt128
from zdex.encoding.zindex import ZIndex
from zdex.interleaving import interleaver as il
from zdex.interleaving.interleaver import AccessFailure, deinterleave, interleave


class FlakyDimension:
    """Fails on one bit read, like a dimension backed by a lost source."""

    def __init__(self, width, fail_at=None, width_error=None):
        self._width = width
        self.fail_at = fail_at
        self.width_error = width_error
        self.reads = []

    def width(self):
        if self.width_error is not None:
            raise self.width_error
        return self._width

    def bit_at(self, index):
        self.reads.append(index)
        if index == self.fail_at:
            raise OSError("source went away")
        return 1


def test_two_four_bit_dimensions():
    z = interleave([FixedWidth(0b0011, 4), FixedWidth(0b1111, 4)])
    assert z.to_bitstring() == "01011111"


def test_ten_wide_dimensions_with_one_bit_each():
    p = 5
    dims = [UInt128(1 << p) for _ in range(10)]
    z = interleave(dims)

    assert len(z) == 10 * 128
    assert z.count_ones() == 10
    assert len(list(z.zeros())) == 10 * 128 - 10
    # MSB-first: value bit p sits at dimension position 127 - p.
    assert list(z.ones()) == [(127 - p) * 10 + d for d in range(10)]


def test_no_dimensions_gives_empty_code():
    z = interleave([])
    assert len(z) == 0
    assert z == ZIndex()


def test_all_zero_width_gives_empty_code():
    z = interleave([BitString(""), FixedWidth(0, 0)])
    assert len(z) == 0


def test_single_dimension_is_unchanged():
    z = interleave([UInt8(0b10000101)])
    assert z.to_bitstring() == "10000101"


def test_length_is_sum_of_widths():
    dims = [BitString("1"), BitString(""), BitString("0101"), FixedWidth(3, 7)]
    assert len(interleave(dims)) == 1 + 0 + 4 + 7


def test_equal_width_positions():
    dims = [BitString("1100"), BitString("1010"), BitString("0111")]
    z = interleave(dims)
    D = len(dims)
    for d, dim in enumerate(dims):
        for k in range(dim.width()):
            assert z.bit_at(d + D * k) == dim.bit_at(k)


def test_exhausted_dimensions_are_skipped_not_padded():
    z = interleave([BitString("1"), BitString("000")])
    assert z.to_bitstring() == "1000"

    z = interleave([BitString("11"), BitString("0000"), BitString("1")])
    # rounds: 1 0 1 | 1 0 | 0 | 0
    assert z.to_bitstring() == "1011000"


@pytest.mark.parametrize("position", [0, 1, 2])
def test_zero_width_dimension_does_not_perturb(position):
    dims = [BitString("10"), BitString("01")]
    baseline = interleave(dims)

    dims.insert(position, BitString(""))
    assert interleave(dims) == baseline
    assert baseline.to_bitstring() == "1001"


def test_repeated_calls_are_identical():
    dims = [UInt8(0xA5), FixedWidth(0x3, 5), BitString("0110")]
    assert interleave(dims) == interleave(dims)
    assert interleave(dims).to_bytes() == interleave(list(dims)).to_bytes()


def test_matches_classic_2d_morton_key():
    # y is the more significant dimension, as in `(spaced_y << 1) | spaced_x`.
    x = 0b00110101
    y = 0b10101110
    z = interleave([UInt8(y), UInt8(x)])
    assert z.to_int() == 0b1000110110111001


def test_matches_classic_3d_morton_key():
    x = 0b00110101
    y = 0b10101110
    z_ = 0b01101011
    z = interleave([UInt8(z_), UInt8(y), UInt8(x)])
    assert z.to_bitstring() == "010100111001110011110101"


def test_bit_failure_aborts_whole_interleave():
    flaky = FlakyDimension(4, fail_at=2)
    with pytest.raises(AccessFailure) as excinfo:
        interleave([BitString("1111"), flaky])

    err = excinfo.value
    assert err.dimension_index == 1
    assert err.bit_index == 2
    assert isinstance(err.__cause__, OSError)
    # Reads stop at the failing bit.
    assert flaky.reads == [0, 1, 2]


def test_width_failure_is_an_access_failure():
    flaky = FlakyDimension(4, width_error=RuntimeError("offline"))
    with pytest.raises(AccessFailure) as excinfo:
        interleave([UInt8(1), flaky])

    assert excinfo.value.dimension_index == 1
    assert excinfo.value.bit_index is None
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert flaky.reads == []


@pytest.mark.parametrize("bad_width", [-1, 2.5, "8", None, True])
def test_invalid_width_is_an_access_failure(bad_width):
    class BadWidth:
        def width(self):
            return bad_width

        def bit_at(self, index):
            return 0

    with pytest.raises(AccessFailure):
        interleave([BadWidth()])


@pytest.mark.parametrize("bad", [5, True, 2.5, None, object()])
def test_unsupported_objects_raise_type_error(bad):
    with pytest.raises(TypeError):
        interleave([bad])


def test_type_error_comes_before_any_read():
    flaky = FlakyDimension(4)
    with pytest.raises(TypeError):
        interleave([flaky, 7])
    assert flaky.reads == []


def test_plain_objects_are_coerced():
    z = interleave(["10", b"\x00"])
    assert len(z) == 2 + 8
    assert z.to_bitstring() == "1000000000"


def test_zindex_can_be_nested_as_a_dimension():
    inner = interleave([BitString("11"), BitString("00")])
    z = interleave([inner, BitString("1111")])
    assert inner.to_bitstring() == "1010"
    assert z.to_bitstring() == "11011101"


def test_deinterleave_recovers_each_dimension():
    dims = [BitString("1"), BitString("0110"), BitString(""), BitString("101")]
    z = interleave(dims)
    parts = deinterleave(z, [d.width() for d in dims])
    assert [p.to_bitstring() for p in parts] == ["1", "0110", "", "101"]


def test_deinterleave_rejects_wrong_profile():
    z = interleave([BitString("10"), BitString("01")])
    with pytest.raises(ValueError):
        deinterleave(z, [2, 1])
    with pytest.raises(ValueError):
        deinterleave(z, [5, -1])


def test_debug_trace_goes_to_stderr(monkeypatch, capsys):
    monkeypatch.setattr(il, "_DEBUG", True)
    interleave([UInt8(1), UInt8(2)])
    err = capsys.readouterr().err
    assert "[ZDEX] interleave dims=2" in err
    assert "bits=16" in err


def test_no_trace_by_default(monkeypatch, capsys):
    monkeypatch.setattr(il, "_DEBUG", False)
    interleave([UInt8(1)])
    assert capsys.readouterr().err == ""
