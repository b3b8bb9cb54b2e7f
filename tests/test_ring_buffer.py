"""Tests for the fixed-capacity ring buffer."""

from combobeat.ring_buffer import RingBuffer


def test_push_beyond_capacity_keeps_newest_in_order():
    buf = RingBuffer(4)
    for item in range(7):
        buf.push(item)
        assert len(buf) <= 4
    assert buf.to_list() == [3, 4, 5, 6]


def test_exactly_full_buffer_keeps_everything():
    buf = RingBuffer(3)
    for item in "abc":
        buf.push(item)
    assert buf.is_full
    assert buf.to_list() == ["a", "b", "c"]


def test_pop_front_and_back():
    buf = RingBuffer(3)
    for item in "abcd":
        buf.push(item)
    assert buf.pop_front() == "b"
    assert buf.pop_back() == "d"
    assert buf.to_list() == ["c"]
    assert len(buf) == 1


def test_empty_reads_return_none():
    buf = RingBuffer(2)
    assert buf.pop_front() is None
    assert buf.pop_back() is None
    assert buf.peek_front() is None
    assert buf.peek_back() is None
    assert len(buf) == 0


def test_peek_does_not_mutate():
    buf = RingBuffer(2)
    buf.push("a")
    buf.push("b")
    assert buf.peek_front() == "a"
    assert buf.peek_back() == "b"
    assert buf.to_list() == ["a", "b"]


def test_to_list_is_a_copy():
    buf = RingBuffer(3)
    buf.push(1)
    snapshot = buf.to_list()
    snapshot.append(99)
    snapshot[0] = 42
    assert buf.to_list() == [1]


def test_clear_is_idempotent():
    buf = RingBuffer(3)
    buf.clear()
    assert buf.to_list() == []
    buf.push("x")
    buf.clear()
    buf.clear()
    assert buf.to_list() == []
    buf.push("y")
    assert buf.to_list() == ["y"]


def test_capacity_is_at_least_one():
    buf = RingBuffer(0)
    assert buf.capacity == 1
    buf.push("a")
    buf.push("b")
    assert buf.to_list() == ["b"]


def test_wraparound_after_pops():
    buf = RingBuffer(3)
    for item in "abc":
        buf.push(item)
    buf.pop_front()
    buf.pop_front()
    buf.push("d")
    buf.push("e")
    assert buf.to_list() == ["c", "d", "e"]
    buf.push("f")
    assert buf.to_list() == ["d", "e", "f"]
