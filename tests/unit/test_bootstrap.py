"""
Unit tests for the bootstrap sequence.
"""

from unittest.mock import MagicMock, call

import pytest

from gluster_bootstrap.cli.commands.bootstrap import run_bootstrap, setup_gluster
from gluster_bootstrap.cli.lib.config import BootstrapConfig
from gluster_bootstrap.exceptions import GlusterCommandError, PrivilegeError

CREATE_CMD = ["gluster", "vol", "create", "test", "node1:/mnt/gluster-brick", "force"]
START_CMD = ["gluster", "vol", "start", "test"]


class TestSetupGluster:
    """Tests for setup_gluster function."""

    @pytest.mark.unit
    def test_create_then_start(self, mock_subprocess):
        setup_gluster("node1")

        assert mock_subprocess.call_args_list == [
            call(CREATE_CMD, check=False),
            call(START_CMD, check=False),
        ]

    @pytest.mark.unit
    def test_create_failure_skips_start(self, mock_subprocess):
        mock_subprocess.return_value = MagicMock(returncode=1)

        with pytest.raises(GlusterCommandError):
            setup_gluster("node1")

        mock_subprocess.assert_called_once_with(CREATE_CMD, check=False)

    @pytest.mark.unit
    def test_progress_messages(self, mock_subprocess, capsys):
        setup_gluster("node1")

        assert capsys.readouterr().out == "setup gluster\n\tcreate vol\n\tstart vol\n"


class TestRunBootstrap:
    """Tests for run_bootstrap function."""

    @pytest.mark.unit
    def test_run_as_root(self, mock_subprocess, mock_geteuid, bootstrap_env):
        run_bootstrap(BootstrapConfig())

        assert (bootstrap_env / ".config").is_dir()
        assert mock_subprocess.call_count == 2

    @pytest.mark.unit
    def test_run_as_user_does_nothing(self, mock_subprocess, mock_geteuid, bootstrap_env):
        mock_geteuid.return_value = 1000

        with pytest.raises(PrivilegeError):
            run_bootstrap(BootstrapConfig())

        assert not (bootstrap_env / ".config").exists()
        mock_subprocess.assert_not_called()

    @pytest.mark.unit
    def test_run_uses_configured_binary(self, mock_subprocess, mock_geteuid, bootstrap_env):
        run_bootstrap(BootstrapConfig(gluster_bin="/opt/gluster/bin/gluster"))

        for args, _ in mock_subprocess.call_args_list:
            assert args[0][0] == "/opt/gluster/bin/gluster"
