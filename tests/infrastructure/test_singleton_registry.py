"""Tests for the singleton registry."""
import threading

from oopatterns.infrastructure.patterns import SingletonRegistry


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


class TestSingletonRegistry:
    """Test the process-wide registry."""

    def setup_method(self):
        Counter.created = 0

    def test_registry_is_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_reset_creates_new_registry(self):
        first = SingletonRegistry.get_instance()
        SingletonRegistry.reset()
        assert SingletonRegistry.get_instance() is not first

    def test_get_creates_once(self):
        registry = SingletonRegistry.get_instance()
        first = registry.get(Counter, start=5)
        second = registry.get(Counter, start=99)
        assert first is second
        assert first.value == 5
        assert Counter.created == 1

    def test_register_prebuilt_instance(self):
        registry = SingletonRegistry.get_instance()
        counter = Counter(3)
        registry.register(Counter, counter)
        assert registry.has(Counter)
        assert registry.get(Counter) is counter

    def test_clear(self):
        registry = SingletonRegistry.get_instance()
        registry.get(Counter)
        registry.clear()
        assert not registry.has(Counter)

    def test_concurrent_get_creates_once(self):
        """Test that racing first accesses create a single instance."""
        registry = SingletonRegistry.get_instance()
        barrier = threading.Barrier(16)
        results = []

        def worker():
            barrier.wait()
            results.append(registry.get(Counter))

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert Counter.created == 1
        assert len({id(r) for r in results}) == 1
