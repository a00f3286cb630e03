from forgecore.kmemory import MemoryTag, MemoryTracker
from forgecore.kstring import string_duplicate, string_length, strings_equal


def test_string_length():
    assert string_length("hello") == len("hello")
    assert string_length("") == 0


def test_duplicate_returns_equal_text():
    assert string_duplicate("abc") == "abc"


def test_duplicate_accounts_terminator():
    tracker = MemoryTracker()
    copy = string_duplicate("abc", tracker)
    assert copy == "abc"
    assert tracker.tagged(MemoryTag.STRING) == len(b"abc") + 1


def test_strings_equal_is_case_sensitive():
    assert strings_equal("Forge", "Forge") is True
    assert strings_equal("Forge", "forge") is False