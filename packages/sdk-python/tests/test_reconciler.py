"""
Tests for dependency reconciliation between a donor library and a host.
"""

from depalign_sdk.dependencies import (
    DependencyReconciler,
    Manifest,
    adopt_dev_dependencies,
    align_prod_dependencies,
)


def manifest(dependencies=None, dev_dependencies=None, name="pkg"):
    data = {"name": name}
    if dependencies is not None:
        data["dependencies"] = dependencies
    if dev_dependencies is not None:
        data["devDependencies"] = dev_dependencies
    return Manifest.model_validate(data)


class TestAdoptDevDependencies:
    """Dev dependencies are adopted wholesale."""

    def test_all_dev_dependencies_in_donor_order(self):
        donor = manifest(dev_dependencies={"a": "1.0.0", "b": "^2.0.0"})
        assert adopt_dev_dependencies(donor) == ["a@1.0.0", "b@2.0.0"]

    def test_independent_of_host(self):
        donor = manifest(dev_dependencies={"a": "1.0.0", "b": "^2.0.0"})
        hosts = [
            manifest(),
            manifest(dependencies={"a": "0.1.0"}),
            manifest(dev_dependencies={"b": "9.9.9"}),
        ]
        for host in hosts:
            result = DependencyReconciler(host).reconcile(donor)
            assert result.dev_targets == ["a@1.0.0", "b@2.0.0"]

    def test_absent_dev_dependencies(self):
        assert adopt_dev_dependencies(manifest()) == []
        assert adopt_dev_dependencies(manifest(dev_dependencies={})) == []


class TestAlignProdDependencies:
    """Prod dependencies are only re-aligned when the host already has them."""

    def test_drops_packages_absent_from_host(self):
        donor = manifest(dependencies={"x": "1.0.0", "y": "2.0.0"})
        host = manifest(dependencies={"x": "0.9.0"})
        assert align_prod_dependencies(donor, host) == ["x@1.0.0"]

    def test_ignores_host_dev_dependencies(self):
        donor = manifest(dependencies={"x": "^1.0.0"})
        host = manifest(dev_dependencies={"x": "0.9.0"})
        assert align_prod_dependencies(donor, host) == []

    def test_keeps_donor_order(self):
        donor = manifest(dependencies={"c": "3.0.0", "a": "~1.1.0", "b": "2.0.0"})
        host = manifest(dependencies={"a": "1.0.0", "b": "1.0.0", "c": "1.0.0"})
        assert align_prod_dependencies(donor, host) == ["c@3.0.0", "a@1.1.0", "b@2.0.0"]

    def test_absent_donor_dependencies(self):
        host = manifest(dependencies={"x": "1.0.0"})
        assert align_prod_dependencies(manifest(), host) == []

    def test_empty_host(self):
        donor = manifest(dependencies={"x": "1.0.0"})
        assert align_prod_dependencies(donor, manifest()) == []


class TestDependencyReconciler:
    """Tests for the reconciler wrapper."""

    def test_result_fields(self):
        donor = manifest(
            name="foo",
            dependencies={"d": "^1.0.0", "e": "1.0.0"},
            dev_dependencies={"t": "1.0.0"},
        )
        host = manifest(dependencies={"d": "0.5.0"})
        result = DependencyReconciler(host).reconcile(donor)

        assert result.donor == "foo"
        assert result.dev_targets == ["t@1.0.0"]
        assert result.prod_targets == ["d@1.0.0"]
        assert result.skipped == ["e"]
        assert not result.is_noop

    def test_noop(self):
        result = DependencyReconciler(manifest()).reconcile(manifest(), donor_name="bare")
        assert result.donor == "bare"
        assert result.is_noop

    def test_host_snapshot_not_mutated(self):
        host = manifest(dependencies={"x": "0.1.0"})
        before = host.model_dump()
        donor = manifest(dependencies={"x": "2.0.0", "y": "1.0.0"}, dev_dependencies={"z": "1.0.0"})
        DependencyReconciler(host).reconcile(donor)
        assert host.model_dump() == before
