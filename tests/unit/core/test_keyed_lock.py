"""
Unit tests for KeyedLock.
"""

import threading

import pytest

from core.domain.exceptions import PersistenceError
from core.infrastructure.locks import KeyedLock


class TestKeyedLock:
    """Tests for KeyedLock."""

    def test_entries_dropped_after_release(self):
        """Test keys no longer held leave no entry behind."""
        locks = KeyedLock()

        for key in range(1000):
            with locks.hold(key):
                assert len(locks) == 1

        assert len(locks) == 0

    def test_entry_lives_while_held(self):
        """Test each held key keeps exactly one entry until released."""
        locks = KeyedLock()

        with locks.hold("a"):
            with locks.hold("b"):
                assert len(locks) == 2
            assert len(locks) == 1
        assert len(locks) == 0

    def test_hold_times_out(self):
        """Test waiting past the timeout raises PersistenceError."""
        locks = KeyedLock()
        held = threading.Event()
        release = threading.Event()

        def _holder():
            with locks.hold("code", timeout=1):
                held.set()
                release.wait(5)

        thread = threading.Thread(target=_holder)
        thread.start()
        held.wait(5)
        try:
            with pytest.raises(PersistenceError):
                with locks.hold("code", timeout=0.05):
                    pass
        finally:
            release.set()
            thread.join()

        assert len(locks) == 0

    def test_different_keys_do_not_block(self):
        """Test holding one key leaves the others free."""
        locks = KeyedLock()

        with locks.hold("a"):
            with locks.hold("b", timeout=0.05):
                pass

    def test_released_after_exception(self):
        """Test the mutex is released when the block raises."""
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            with locks.hold("a"):
                raise RuntimeError("boom")

        with locks.hold("a", timeout=0.05):
            pass
        assert len(locks) == 0

    def test_serializes_critical_section(self):
        """Test concurrent holders of one key never overlap."""
        locks = KeyedLock()
        active = []
        overlaps = []

        def _work():
            for _ in range(50):
                with locks.hold("k"):
                    active.append(1)
                    if len(active) > 1:
                        overlaps.append(True)
                    active.pop()

        threads = [threading.Thread(target=_work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert overlaps == []
        assert len(locks) == 0
