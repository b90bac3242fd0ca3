import copy
import operator

import numpy as np
import pytest

from halton import InvalidBase, RangeOverflow, Sequence, SequenceParams, number

LAST_BASE_2 = 0.9999990463256836


def test_base_2():
    seq = Sequence(2)
    expected = [0.5, 0.25, 0.75, 0.125, 0.625, 0.375, 0.875, 0.0625, 0.5625]
    assert [seq.step() for _ in expected] == expected


def test_base_3():
    seq = Sequence(3)
    expected = [
        0.3333333333333333, 0.6666666666666666, 0.1111111111111111,
        0.4444444444444444, 0.7777777777777777, 0.2222222222222222,
        0.5555555555555555, 0.8888888888888888, 0.0370370370370370,
    ]
    assert [seq.step() for _ in expected] == pytest.approx(expected)


def test_first_step_equals_number():
    for base in (2, 3, 5, 17, 255):
        assert Sequence(base).step() == pytest.approx(number(base, 1))


def test_kth_step_equals_number():
    for base in (2, 3, 7, 17):
        seq = Sequence(base)
        for k in range(1, 2000):
            assert seq.step() == pytest.approx(number(base, k), rel=1e-12, abs=1e-15)


def test_iterator_protocol():
    seq = Sequence(2)
    assert iter(seq) is seq
    assert [next(seq) for _ in range(3)] == [0.5, 0.25, 0.75]
    assert list(Sequence(2, SequenceParams(depth=3))) == [
        0.5, 0.25, 0.75, 0.125, 0.625, 0.375, 0.875,
    ]


def test_last_value_and_exhaustion():
    seq = Sequence(2)
    values = seq.take(2**20)
    assert values.shape == (2**20 - 1,)
    assert values[-1] == LAST_BASE_2
    assert seq.exhausted
    assert seq.remaining() == 0
    assert seq.step() is None
    assert seq.step() is None
    with pytest.raises(StopIteration):
        next(seq)


def test_exhaustion_after_base_pow_depth_minus_one_steps():
    for base, depth in ((2, 4), (3, 3), (5, 2), (7, 1)):
        seq = Sequence(base, SequenceParams(depth=depth))
        steps = 0
        while seq.step() is not None:
            steps += 1
        assert steps == base**depth - 1
        for _ in range(5):
            assert seq.step() is None
        assert seq.position == base**depth - 1


def test_remaining_counts_down():
    seq = Sequence(3, SequenceParams(depth=3))
    assert seq.max_position == 26
    assert seq.remaining() == 26
    assert operator.length_hint(seq) == 26
    for left in range(25, -1, -1):
        assert seq.step() is not None
        assert seq.remaining() == left
    assert seq.step() is None
    assert seq.remaining() == 0


def test_position_tracks_steps():
    seq = Sequence(5)
    assert seq.position == 0
    for k in range(1, 300):
        seq.step()
        assert seq.position == k


def test_take_matches_step():
    a = Sequence(11)
    b = Sequence(11)
    bulk = a.take(5000)
    assert bulk.dtype == np.float64
    assert bulk.tolist() == [b.step() for _ in range(5000)]
    assert a.position == b.position == 5000
    assert a.take(0).shape == (0,)


def test_float32_values():
    seq = Sequence(2, SequenceParams(value_dtype="float32"))
    vals = seq.take(4)
    assert vals.dtype == np.float32
    assert vals.tolist() == [0.5, 0.25, 0.75, 0.125]


def test_invalid_base():
    for base in (1, 0, -3):
        with pytest.raises(InvalidBase):
            Sequence(base)
    with pytest.raises(InvalidBase):
        Sequence(3.0)
    with pytest.raises(InvalidBase):
        Sequence(70000)
    assert Sequence(70000, SequenceParams(digit_dtype="uint32")).step() == pytest.approx(1 / 70000)


def test_range_overflow_for_wide_bases():
    seq = Sequence(10000)
    with pytest.raises(RangeOverflow):
        seq.remaining()
    with pytest.raises(RangeOverflow):
        seq.max_position
    with pytest.raises(OverflowError):
        seq.remaining()
    # stepping is unaffected
    assert seq.step() == pytest.approx(1e-4)


def test_range_overflow_for_narrow_index_dtype():
    assert Sequence(2, SequenceParams(depth=8, index_dtype="uint8")).remaining() == 255
    seq = Sequence(2, SequenceParams(depth=9, index_dtype="uint8"))
    with pytest.raises(RangeOverflow):
        seq.remaining()
    with pytest.raises(RangeOverflow):
        seq.reposition(256)
    seq.reposition(255)
    assert seq.step() == pytest.approx(number(2, 256))


def test_copy_is_independent():
    seq = Sequence(3)
    for _ in range(10):
        seq.step()
    clone = seq.copy()
    assert clone.position == 10
    assert clone.step() == seq.step()
    for _ in range(20):
        clone.step()
    assert seq.position == 11
    assert clone.position == 31

    deep = copy.deepcopy(seq)
    shallow = copy.copy(seq)
    deep.step()
    assert shallow.position == seq.position == 11
    assert deep.position == 12


def test_repr():
    seq = Sequence(2)
    seq.step()
    assert repr(seq) == "Sequence(base=2, depth=20, position=1)"
