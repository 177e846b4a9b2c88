"""Tests for the singleton and the identity check."""
import pytest

from oopatterns.domain.singleton import IdentityReport, Singleton, check_singleton_identity


class TestSingleton:
    """Test lazy creation and identity of the singleton."""

    def test_get_instance_returns_same_object(self):
        assert Singleton.get_instance() is Singleton.get_instance()

    def test_instance_created_lazily(self):
        assert Singleton._instance is None
        instance = Singleton.get_instance()
        assert Singleton._instance is instance

    def test_reset_instance_allows_new_instance(self):
        first = Singleton.get_instance()
        Singleton.reset_instance()
        assert Singleton.get_instance() is not first

    def test_a_method(self):
        assert Singleton.get_instance().a_method() == "Inside Singleton::aMethod"


class TestIdentityCheck:
    """Test the concurrent identity check."""

    def test_concurrent_first_access_yields_one_instance(self):
        """Test that racing threads all receive the same instance."""
        report = check_singleton_identity(Singleton.get_instance, threads=32)
        assert report.threads == 32
        assert report.distinct_instances == 1
        assert report.all_identical
        assert set(report.instance_ids) == {id(Singleton.get_instance())}

    def test_single_thread(self):
        assert check_singleton_identity(Singleton.get_instance, threads=1).all_identical

    def test_detects_distinct_instances(self):
        report = check_singleton_identity(object, threads=4)
        assert report.distinct_instances == 4
        assert not report.all_identical

    def test_rejects_zero_threads(self):
        with pytest.raises(ValueError):
            check_singleton_identity(Singleton.get_instance, threads=0)

    def test_accessor_error_is_raised(self):
        def accessor():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            check_singleton_identity(accessor, threads=3)

    def test_report_to_dict(self):
        assert IdentityReport(threads=2, distinct_instances=1, instance_ids=[1, 1]).to_dict() == {
            "threads": 2,
            "distinct_instances": 1,
            "all_identical": True,
        }
