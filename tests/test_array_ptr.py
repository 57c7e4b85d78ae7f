import pytest

from vextra.array_ptr import ArrayPtr
from vextra.mem_contents import MemContents, SlotStateError


def test_empty_is_uninitialised_and_nonnull():
    ptr = ArrayPtr.empty(4)
    assert ptr.addr != 0
    assert len(ptr) == 4
    assert ptr.is_uninit_all()


@pytest.mark.parametrize("length", [0, -2])
def test_empty_requires_positive_length(length):
    with pytest.raises(ValueError):
        ArrayPtr.empty(length)


def test_distinct_allocations_have_distinct_addresses():
    a = ArrayPtr.empty(2)
    b = ArrayPtr.empty(2)
    assert a.addr != b.addr


def test_new_fills_with_default():
    ptr = ArrayPtr.new(3, 9)
    assert ptr.is_init_all()
    assert ptr.opt_value == (MemContents.init(9),) * 3
    assert ptr.borrow() == (9, 9, 9)


def test_make_as_requires_uninitialised():
    ptr = ArrayPtr.new(2, 0)
    with pytest.raises(SlotStateError):
        ptr.make_as(1)


def test_insert_and_take_at_round_trip():
    ptr = ArrayPtr.empty(3)
    ptr.insert(2, "z")
    assert ptr.is_init(2)
    assert ptr.get(2) == "z"
    assert ptr.take_at(2) == "z"
    assert ptr.is_uninit(2)


def test_insert_into_initialised_slot_rejected():
    ptr = ArrayPtr.new(2, "a")
    with pytest.raises(SlotStateError):
        ptr.insert(0, "b")


def test_take_at_uninitialised_rejected():
    ptr = ArrayPtr.empty(2)
    with pytest.raises(SlotStateError):
        ptr.take_at(1)


def test_update_returns_previous_value():
    ptr = ArrayPtr.new(3, "old")
    assert ptr.update(1, "new") == "old"
    assert ptr.borrow() == ("old", "new", "old")


def test_update_uninitialised_rejected():
    ptr = ArrayPtr.empty(2)
    with pytest.raises(SlotStateError):
        ptr.update(0, 1)
    assert ptr.is_uninit_all()


def test_overwrite_works_in_either_state():
    ptr = ArrayPtr.empty(2)
    ptr.overwrite(0, "first")
    ptr.overwrite(0, "second")
    assert ptr.borrow_at(0) == "second"
    assert ptr.is_uninit(1)


def test_overwrite_out_of_range():
    ptr = ArrayPtr.empty(2)
    with pytest.raises(IndexError):
        ptr.overwrite(2, 0)


def test_take_all_empties_array():
    ptr = ArrayPtr.empty(3)
    for i, v in enumerate([10, 20, 30]):
        ptr.insert(i, v)
    assert ptr.take_all() == (10, 20, 30)
    assert ptr.is_uninit_all()


def test_into_inner_returns_values_and_frees():
    ptr = ArrayPtr.new(2, "q")
    assert ptr.into_inner() == ("q", "q")
    assert ptr.is_freed
    with pytest.raises(SlotStateError):
        ptr.get(0)


def test_free_requires_uninitialised():
    ptr = ArrayPtr.new(2, 1)
    with pytest.raises(SlotStateError):
        ptr.free()
    assert not ptr.is_freed


def test_free_then_use_rejected():
    ptr = ArrayPtr.empty(2)
    ptr.free()
    assert ptr.is_freed
    with pytest.raises(SlotStateError):
        ptr.insert(0, 1)
    with pytest.raises(SlotStateError):
        ptr.free()


def test_leak_contents_allows_free():
    ptr = ArrayPtr.new(2, "x")
    ptr.leak_contents(0)
    ptr.leak_contents(1)
    assert ptr.is_uninit_all()
    ptr.free()
    assert ptr.is_freed


def test_borrow_requires_all_init():
    ptr = ArrayPtr.empty(2)
    ptr.insert(0, 1)
    with pytest.raises(SlotStateError):
        ptr.borrow()
    assert ptr.borrow_at(0) == 1