"""
Tests for installer invocation.
"""

import subprocess
from unittest.mock import patch

import pytest

from depalign_common import InstallerInvocationError
from depalign_sdk import InstallAction, PackageInstaller


class TestPackageInstaller:
    """Tests for PackageInstaller commands."""

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_install_library_appends_latest(self, mock_run, tmp_path):
        installer = PackageInstaller("npm", cwd=tmp_path)
        step = installer.install_library("foo")

        mock_run.assert_called_once_with(["npm", "install", "--save", "foo@latest"], cwd=tmp_path, check=True)
        assert step.action == InstallAction.LIBRARY
        assert step.executed is True

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_install_library_keeps_explicit_version(self, mock_run):
        PackageInstaller("npm").install_library("foo@1.2.0")
        assert mock_run.call_args[0][0] == ["npm", "install", "--save", "foo@1.2.0"]

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_scoped_library_gets_latest(self, mock_run):
        PackageInstaller("npm").install_library("@acme/tools")
        assert mock_run.call_args[0][0] == ["npm", "install", "--save", "@acme/tools@latest"]

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_dev_dependencies_single_invocation(self, mock_run):
        PackageInstaller("npm").install_dev_dependencies(["a@1.0.0", "b@2.0.0"])
        mock_run.assert_called_once()
        assert mock_run.call_args[0][0] == ["npm", "install", "--save-dev", "a@1.0.0", "b@2.0.0"]

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_prod_dependencies(self, mock_run):
        PackageInstaller("npm").install_prod_dependencies(["x@1.0.0"])
        assert mock_run.call_args[0][0] == ["npm", "install", "--save", "x@1.0.0"]

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_empty_lists_skip_invocation(self, mock_run):
        installer = PackageInstaller("npm")
        assert installer.install_dev_dependencies([]) is None
        assert installer.install_prod_dependencies([]) is None
        mock_run.assert_not_called()
        assert installer.history == []

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_install_all(self, mock_run):
        PackageInstaller("npm").install_all()
        assert mock_run.call_args[0][0] == ["npm", "install"]

    @pytest.mark.parametrize(
        "name,dev,all_",
        [
            ("yarn", ["yarn", "add", "--dev", "a@1"], ["yarn", "install"]),
            ("pnpm", ["pnpm", "add", "--save-dev", "a@1"], ["pnpm", "install"]),
        ],
    )
    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_other_installers(self, mock_run, name, dev, all_):
        installer = PackageInstaller(name)
        installer.install_dev_dependencies(["a@1"])
        installer.install_all()
        assert [c[0][0] for c in mock_run.call_args_list] == [dev, all_]

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_history(self, mock_run):
        installer = PackageInstaller("npm")
        installer.install_library("foo")
        installer.install_dev_dependencies(["t@1.0.0"])
        installer.install_all()
        assert [s.action for s in installer.history] == [
            InstallAction.LIBRARY,
            InstallAction.DEV,
            InstallAction.ALL,
        ]
        assert installer.history[1].command_line == "npm install --save-dev t@1.0.0"


class TestDryRun:
    """Dry-run mode records without executing."""

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_nothing_executed(self, mock_run):
        installer = PackageInstaller("npm", dry_run=True)
        installer.install_library("foo")
        installer.install_prod_dependencies(["x@1.0.0"])
        installer.install_all()

        mock_run.assert_not_called()
        assert len(installer.history) == 3
        assert all(not step.executed for step in installer.history)


class TestInstallerFailures:
    """Installer failures propagate as InstallerInvocationError."""

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_non_zero_exit(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(2, ["npm", "install"])

        with pytest.raises(InstallerInvocationError) as exc_info:
            PackageInstaller("npm").install_all()
        assert exc_info.value.returncode == 2
        assert exc_info.value.exit_code == 2
        assert exc_info.value.command == ["npm", "install"]

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_installer_not_found(self, mock_run):
        mock_run.side_effect = FileNotFoundError()

        with pytest.raises(InstallerInvocationError) as exc_info:
            PackageInstaller("pnpm").install_all()
        assert "pnpm" in str(exc_info.value)
        assert exc_info.value.returncode is None
        assert exc_info.value.exit_code == 1

    @patch("depalign_sdk.utils.package_manager.subprocess.run")
    def test_permission_error(self, mock_run):
        mock_run.side_effect = PermissionError("denied")

        with pytest.raises(InstallerInvocationError):
            PackageInstaller("npm").install_all()
