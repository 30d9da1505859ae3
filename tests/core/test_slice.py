import numpy as np
import pytest

from slicekit import (
    ConstructionError,
    End,
    Full,
    RangeError,
    ReadonlySlice,
    Slice,
    SliceIndexError,
    make,
)


def test_construction_length_and_capacity():
    s = Slice(5)
    assert len(s) == 5
    assert s.capacity == 5
    assert list(s) == [0, 0, 0, 0, 0]

    s = Slice(5, 10)
    assert len(s) == 5
    assert s.capacity == 10


def test_capacity_below_length_raises():
    with pytest.raises(ConstructionError):
        Slice(10, 5)

    # Still a ValueError for callers that don't know slicekit
    with pytest.raises(ValueError):
        Slice(10, 5)


def test_buffer_constructor_negative_stop(ten):
    s = Slice(ten.buffer, 0, -5)
    assert s == make(0, 1, 2, 3, 4)

    with pytest.raises(RangeError):
        Slice(ten.buffer, 0, 11)


def test_equality(ten, five):
    assert ten == make(0, 1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert ten != five
    assert not (ten == five)
    assert ten != [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_slicing(ten, five):
    assert ten[0:5] == five
    assert ten.slice(0, 5) == five
    assert ten[0:-5] == five
    assert ten[5:] == make(5, 6, 7, 8, 9)


def test_slicing_corners(ten, zero):
    assert ten[0:0] == zero
    assert ten[10:End] == zero
    assert ten[0:End] == ten


def test_slicing_out_of_range(ten):
    with pytest.raises(RangeError):
        ten.slice(-1, 3)
    with pytest.raises(RangeError):
        ten.slice(11, End)
    with pytest.raises(RangeError):
        ten.slice(0, 11)
    with pytest.raises(RangeError):
        ten.slice(6, 4)


def test_slice_step_rejected(ten):
    with pytest.raises(ValueError):
        ten[::2]


def test_slice_to_end_and_full(five):
    s = Slice(5, 10)
    five.copy_to(s)

    assert s[2:End] == make(2, 3, 4)
    assert s[0:Full] == make(0, 1, 2, 3, 4, 0, 0, 0, 0, 0)
    assert len(s[3:Full]) == 7


def test_subslice_shares_buffer(ten):
    sub = ten[2:5]
    assert sub.aliases(ten)
    assert sub.offset == 2
    assert sub.capacity == 8

    sub[0] = 42
    assert ten[2] == 42


def test_index_out_of_range(five):
    with pytest.raises(SliceIndexError):
        five[5]
    with pytest.raises(SliceIndexError):
        five[-1]
    with pytest.raises(IndexError):
        five[5] = 1


def test_iteration(ten):
    i = 0
    for item in ten:
        assert item == i
        i += 1
    assert i == 10
    assert list(reversed(ten)) == list(range(9, -1, -1))


def test_append(five):
    fives = make(0, 1, 2, 3, 4).append(five)
    assert fives == make(0, 1, 2, 3, 4, 0, 1, 2, 3, 4)

    seven = make(0, 1, 2, 3, 4).append(5, 6)
    assert seven == make(0, 1, 2, 3, 4, 5, 6)


def test_append_into_slack_aliases(spare, five):
    witness = spare[0:Full]
    grown = spare.append(five)

    assert grown == make(0, 1, 2, 3, 4, 0, 1, 2, 3, 4)
    assert len(grown) == 10
    assert grown.aliases(spare)

    grown[0] = 99
    assert spare[0] == 99
    assert witness[0] == 99
    assert witness[5:End] == five


def test_append_beyond_capacity_reallocates(five):
    a = Slice(5)
    for k in range(5):
        a[k] = k

    grown = a.append(five)
    assert not grown.aliases(a)
    assert len(grown) == 10
    assert grown.capacity == 20

    grown[0] = 99
    assert a[0] == 0


def test_append_from_offset_keeps_prefix(ten):
    tail = ten[7:End]
    grown = tail.append(10, 11)

    assert grown == make(7, 8, 9, 10, 11)


def test_append_from_offset_writes_into_parent_slack():
    s = Slice(10)
    v = s[2:4]
    r = v.append(make(9))

    assert r.aliases(s)
    assert r.offset == 2
    assert s.buffer.data[4] == 9
    assert r == make(0, 0, 9)


def test_append_rejects_narrowing():
    s = make(1, 2)
    with pytest.raises(TypeError):
        s.append(make(1.5))
    with pytest.raises(TypeError):
        s.append(2.75)
    with pytest.raises(TypeError):
        s.append(3, 2.75)
    assert s == make(1, 2)


def test_append_widening_is_allowed():
    s = make(1.5).append(2)
    assert s.element_type is float
    assert s == make(1.5, 2.0)

    assert make(1.5).append(make(2, 3)) == make(1.5, 2.0, 3.0)
    assert make(1, 2).append(True) == make(1, 2, 1)


def test_setitem_rejects_narrowing(five):
    with pytest.raises(TypeError):
        five[0] = 2.5
    assert five[0] == 0

    five[0] = np.int32(7)
    assert five[0] == 7


def test_insert_rejects_narrowing(five):
    with pytest.raises(TypeError):
        five.insert(0, 1.5)
    assert five == make(0, 1, 2, 3, 4)


def test_copy_to_rejects_narrowing(five):
    with pytest.raises(TypeError):
        make(0.5, 1.5).copy_to(five)
    assert five == make(0, 1, 2, 3, 4)


def test_object_slice_accepts_any_value():
    s = make("a", "b")
    s[0] = 3
    assert s.append(None) == make(3, "b", None)


def test_buffer_bounds_must_be_integers():
    buf = Slice(5).buffer
    with pytest.raises(TypeError):
        Slice(buf, 0.5, 3)
    with pytest.raises(TypeError):
        Slice(buf, 0, "3")
    assert len(Slice(buf, np.int64(1), np.int64(3))) == 2


def test_repeated_append_amortizes():
    s = Slice(0)
    buffers = set()
    for k in range(100):
        s = s.append(k)
        buffers.add(id(s.buffer))

    assert list(s) == list(range(100))
    assert len(buffers) < 10


def test_insert_reallocates_exact(spare):
    before = spare.buffer
    spare.insert(2, 42)

    assert spare == make(0, 1, 42, 2, 3, 4)
    assert spare.capacity == 6
    assert spare.offset == 0
    assert spare.buffer is not before


def test_insert_out_of_range(five):
    with pytest.raises(SliceIndexError):
        five.insert(6, 1)
    with pytest.raises(SliceIndexError):
        five.insert(-1, 1)
    assert five == make(0, 1, 2, 3, 4)


def test_add_appends_at_end(ten):
    view = ten[2:4]
    view.add(7)

    assert view == make(2, 3, 7)
    assert ten[4] == 4  # original buffer untouched


def test_remove_at(five):
    five.remove_at(0)
    assert five == make(1, 2, 3, 4)

    del five[3]
    assert five == make(1, 2, 3)

    with pytest.raises(SliceIndexError):
        five.remove_at(3)


def test_remove(five):
    assert five.remove(3) is True
    assert five == make(0, 1, 2, 4)

    before = five.buffer
    assert five.remove(99) is False
    assert five.buffer is before


def test_clear(ten):
    original = ten.buffer
    ten.clear()

    assert len(ten) == 0
    assert ten.capacity == 0
    assert ten.buffer is not original
    assert list(original.data) == list(range(10))


def test_contains_and_index_of(five):
    assert 3 in five
    assert 99 not in five
    assert five.index_of(0) == 0
    assert five.index_of(4) == 4
    assert five.index_of(99) == -1
    assert five.index(4) == 4


def test_copy_to_slice():
    s1 = make(1, 1, 1, 1, 1, 1)
    s2 = make(2, 2, 2, 2)
    assert s1.copy_to(s2) == 4
    assert all(i == 1 for i in s2)

    s1 = make(1, 1, 1)
    s2 = make(2, 2, 2, 2, 2)
    assert s1.copy_to(s2) == 3
    assert s2 == make(1, 1, 1, 2, 2)


def test_copy_to_overlapping_slice():
    parent = make(0, 1, 2, 3, 4, 5, 6, 7)
    s1 = parent[0:6]
    s2 = parent[3:End]

    n = s1.copy_to(s2)
    assert n == 5
    assert s2 == make(0, 1, 2, 3, 4)


def test_copy_into_list_and_array(five):
    target = [9] * 7
    five.copy_into(target, 2)
    assert target == [9, 9, 0, 1, 2, 3, 4]

    arr = np.zeros(5, dtype=np.int64)
    five.copy_into(arr)
    assert arr.tolist() == [0, 1, 2, 3, 4]

    with pytest.raises(RangeError):
        five.copy_into([0] * 4)


def test_clone_is_independent(ten):
    view = ten[2:5]
    copy = view.clone()

    assert copy == view
    assert copy.capacity == 3
    assert not copy.aliases(view)

    copy[0] = 99
    assert ten[2] == 2


def test_to_array(ten):
    assert ten.to_array() is ten.buffer.data

    part = ten[1:3].to_array()
    assert part.tolist() == [1, 2]
    part[0] = 99
    assert ten[1] == 1


def test_to_segment(ten):
    seg = ten[2:6].to_segment()
    assert seg.array is ten.buffer.data
    assert seg.offset == 2
    assert seg.count == 4
    assert list(seg) == [2, 3, 4, 5]

    region = seg.view()
    assert region.tolist() == [2, 3, 4, 5]
    with pytest.raises(ValueError):
        region[0] = 1


def test_hash_includes_offset(ten):
    a = ten[2:4]
    b = make(2, 3)

    assert a == b
    assert hash(a) == 2 ^ 2 ^ hash(2) ^ hash(3)
    assert hash(b) == 0 ^ 2 ^ hash(2) ^ hash(3)
    assert hash(a) != hash(b)


def test_to_string():
    assert str(Slice(0, element_type=str)) == "Slice<str>[]"
    assert str(make(0, 1, 2, 3)) == "Slice<int>[0, 1, 2, 3]"
    assert repr(make("a", "b")) == "Slice<str>[a, b]"


def test_as_readonly_shares_buffer(five):
    ro = five.as_readonly()
    assert isinstance(ro, ReadonlySlice)
    assert ro == five

    five[0] = 42
    assert ro[0] == 42
