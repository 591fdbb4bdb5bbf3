"""Unit tests for the IOLayer git commands."""

import pytest
from unittest.mock import Mock
from git.exc import GitCommandError

from create_tag.io_layer import IOLayer
from create_tag.exceptions import ExternalCommandError


class TestIOLayer:
    """Test the git command wrappers in IOLayer."""

    @pytest.fixture
    def mock_repo(self):
        """Create a mock Git repository."""
        repo = Mock()
        repo.git = Mock()
        return repo

    @pytest.fixture
    def io_layer(self, mock_repo):
        """Create an IOLayer instance with mocked dependencies."""
        return IOLayer(mock_repo, remote="origin", dry_run=False)

    def test_local_tags(self, io_layer, mock_repo):
        mock_repo.git.execute.return_value = "v1.0.0\nv1.1.0\n\n"
        assert io_layer.local_tags() == ["v1.0.0", "v1.1.0"]
        mock_repo.git.execute.assert_called_once_with(["git", "tag", "-l"])

    def test_remote_tags_filters_dereferenced_entries(self, io_layer, mock_repo):
        mock_repo.git.execute.return_value = (
            "aaa\trefs/tags/v1.0.0\n"
            "bbb\trefs/tags/v1.0.0^{}\n"
            "ccc\trefs/tags/v1.1.0_feature.1\n"
        )
        assert io_layer.remote_tags() == ["v1.0.0", "v1.1.0_feature.1"]
        mock_repo.git.execute.assert_called_once_with(["git", "ls-remote", "--tags", "origin"])

    def test_branch_exists(self, io_layer, mock_repo):
        mock_repo.git.execute.return_value = ""
        assert io_layer.branch_exists("master")
        mock_repo.git.execute.assert_called_once_with(
            ["git", "show-ref", "--verify", "--quiet", "refs/heads/master"]
        )

    def test_branch_does_not_exist(self, io_layer, mock_repo):
        mock_repo.git.execute.side_effect = GitCommandError("show-ref", 1)
        assert not io_layer.branch_exists("master")

    def test_merge_base_missing(self, io_layer, mock_repo):
        mock_repo.git.execute.side_effect = GitCommandError("merge-base", 1)
        assert io_layer.merge_base("feature", "main") is None

    def test_commit_exists(self, io_layer, mock_repo):
        mock_repo.git.execute.return_value = "abc123"
        assert io_layer.commit_exists("HEAD")
        mock_repo.git.execute.assert_called_once_with(
            ["git", "rev-parse", "--verify", "--quiet", "HEAD^{commit}"]
        )

    def test_has_remote(self, io_layer, mock_repo):
        mock_repo.git.execute.return_value = "origin\nupstream"
        assert io_layer.has_remote()
        assert not io_layer.has_remote("fork")

    def test_create_tag(self, io_layer, mock_repo):
        assert io_layer.create_tag("v1.0.0", "HEAD", "Build tag v1.0.0")
        mock_repo.git.execute.assert_called_once_with(
            ["git", "tag", "-a", "v1.0.0", "HEAD", "-m", "Build tag v1.0.0"]
        )

    def test_git_failure_raises_external_command_error(self, io_layer, mock_repo):
        mock_repo.git.execute.side_effect = GitCommandError("push", 128, stderr="permission denied")
        with pytest.raises(ExternalCommandError) as exc_info:
            io_layer.push_tag("v1.0.0")
        assert exc_info.value.command == "git push origin refs/tags/v1.0.0"
        assert "permission denied" in str(exc_info.value)

    def test_delete_local_tag_already_absent(self, io_layer, mock_repo):
        mock_repo.git.execute.side_effect = [GitCommandError("tag", 1), "v1.0.0"]
        assert io_layer.delete_local_tag("v1.0.0_gone.1")

    def test_delete_local_tag_failure_when_still_present(self, io_layer, mock_repo):
        mock_repo.git.execute.side_effect = [GitCommandError("tag", 1), "v1.0.0_stuck.1"]
        with pytest.raises(ExternalCommandError):
            io_layer.delete_local_tag("v1.0.0_stuck.1")

    def test_delete_remote_tag(self, io_layer, mock_repo):
        io_layer.delete_remote_tag("v1.0.0_gone.1")
        mock_repo.git.execute.assert_called_once_with(
            ["git", "push", "--delete", "origin", "refs/tags/v1.0.0_gone.1"]
        )

    def test_dry_run_skips_mutations(self, mock_repo, capsys):
        io_layer = IOLayer(mock_repo, dry_run=True)

        assert not io_layer.create_tag("v1.0.0", "HEAD", "Build tag v1.0.0")
        assert not io_layer.push_tag("v1.0.0")
        assert not io_layer.push_branch("main")
        assert not io_layer.delete_local_tag("v1.0.0_x.1")
        assert not io_layer.delete_remote_tag("v1.0.0_x.1")

        mock_repo.git.execute.assert_not_called()
        out = capsys.readouterr().out
        assert "[DRY RUN] Would create tag v1.0.0 on HEAD" in out
        assert "[DRY RUN] Would push tag v1.0.0 to origin" in out

    def test_read_yaml(self, io_layer, tmp_path):
        config_file = tmp_path / ".create-tag.yaml"
        config_file.write_text("remote: upstream\ntags:\n  ticket_projects: [OPS]\n")
        assert io_layer.read_yaml(str(config_file)) == {"remote": "upstream", "tags": {"ticket_projects": ["OPS"]}}
        assert io_layer.read_yaml(str(tmp_path / "missing.yaml")) is None
