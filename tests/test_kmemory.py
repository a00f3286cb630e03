import pytest

from forgecore.kmemory import (
    MemoryTag,
    MemoryTracker,
    copy_memory,
    set_memory,
    zero_memory,
)


def test_allocate_returns_zeroed_buffer():
    tracker = MemoryTracker()
    block = tracker.allocate(16, MemoryTag.ARRAY)
    assert block == bytearray(16)


def test_allocate_and_free_balance():
    tracker = MemoryTracker()
    block = tracker.allocate(100, MemoryTag.GAME)
    tracker.allocate(50, MemoryTag.SCENE)
    assert tracker.total_allocated == 150
    assert tracker.tagged(MemoryTag.GAME) == 100
    tracker.free(block, 100, MemoryTag.GAME)
    assert tracker.tagged(MemoryTag.GAME) == 0
    assert tracker.total_allocated == 50


def test_unknown_tag_warns_on_allocate(capsys):
    tracker = MemoryTracker()
    tracker.allocate(4, MemoryTag.UNKNOWN)
    assert "kallocate called using MEMORY_TAG_UNKNOWN" in capsys.readouterr().out


def test_unknown_tag_warns_on_free(capsys):
    tracker = MemoryTracker()
    block = tracker.allocate(4, MemoryTag.UNKNOWN)
    tracker.free(block, 4, MemoryTag.UNKNOWN)
    assert "kfree called using MEMORY_TAG_UNKNOWN" in capsys.readouterr().out
    assert tracker.tagged(MemoryTag.UNKNOWN) == 0


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        MemoryTracker().allocate(-1, MemoryTag.ARRAY)


def test_usage_report_has_one_line_per_tag():
    lines = MemoryTracker().usage_report().splitlines()
    assert lines[0] == "System memory use (tagged):"
    assert len(lines) == 1 + len(MemoryTag)
    assert all(line.endswith("B") for line in lines[1:])


def test_usage_report_units():
    tracker = MemoryTracker()
    tracker.allocate(2048, MemoryTag.DARRAY)
    tracker.allocate(3 * 1024 * 1024, MemoryTag.TEXTURE)
    tracker.allocate(5, MemoryTag.STRING)
    lines = tracker.usage_report().splitlines()
    assert "  DARRAY     : 2.00KiB" in lines
    assert "  TEXTURE    : 3.00MiB" in lines
    assert "  STRING     : 5.00B" in lines


def test_zero_memory_clears_buffer():
    buf = bytearray(b"\x01\x02\x03")
    assert zero_memory(buf) is buf
    assert buf == bytearray(3)


def test_copy_memory_copies_prefix():
    dest = bytearray(4)
    copy_memory(dest, b"abcdef", 3)
    assert dest == bytearray(b"abc\x00")


def test_copy_memory_rejects_oversize():
    with pytest.raises(ValueError):
        copy_memory(bytearray(2), b"abc", 3)


def test_set_memory_fills_prefix():
    buf = bytearray(4)
    set_memory(buf, 7, 3)
    assert buf == bytearray([7, 7, 7, 0])


def test_set_memory_rejects_oversize():
    with pytest.raises(ValueError):
        set_memory(bytearray(2), 1, 5)