"""Tests for the jj, git and gh command wrappers."""

import pytest

from jays.vcs import gh, git, jj
from jays.vcs.exceptions import CommandError
from jays.vcs.models import ListResult, ListStatus


class TestParseBookmarkNames:
    """Tests for _parse_bookmark_names function."""

    def test_parses_local_bookmarks(self):
        """Test that names are taken from the start of each line."""
        output = (
            "feature: qpvuntsm 230dd059 Add feature\n"
            "main: zzzzzzzz 00000000 (empty) initial commit\n"
        )
        assert jj._parse_bookmark_names(output) == ["feature", "main"]

    def test_skips_remote_tracking_lines(self):
        """Test that indented remote tracking lines are ignored."""
        output = (
            "main: zzzzzzzz 00000000 initial commit\n"
            "  @origin: zzzzzzzz 00000000 initial commit\n"
        )
        assert jj._parse_bookmark_names(output) == ["main"]

    def test_strips_conflict_marker(self):
        """Test that a conflicted bookmark keeps only its name."""
        output = "topic (conflicted):\n  + abc 123 one\n  + def 456 two\n"
        assert jj._parse_bookmark_names(output) == ["topic"]

    def test_empty_output(self):
        """Test that empty output yields no names."""
        assert jj._parse_bookmark_names("") == []


class TestListBookmarks:
    """Tests for list_bookmarks function."""

    def test_ok(self, mocker):
        """Test a listing with bookmarks."""
        mocker.patch("jays.vcs.jj._run_command", return_value="main: abc 123 msg")

        result = jj.list_bookmarks()

        assert result.status is ListStatus.OK
        assert result.items == ["main"]

    def test_empty(self, mocker):
        """Test that no output is EMPTY rather than an error."""
        mocker.patch("jays.vcs.jj._run_command", return_value="")

        result = jj.list_bookmarks()

        assert result.status is ListStatus.EMPTY
        assert result.items == []
        assert not result

    def test_error(self, mocker):
        """Test that a failing listing is reported as ERROR."""
        mocker.patch(
            "jays.vcs.jj._run_command",
            side_effect=CommandError(["jj", "bookmark", "list"], "no repo"),
        )

        result = jj.list_bookmarks()

        assert result.is_error
        assert "no repo" in result.reason
        assert result.items == []


class TestListRemotes:
    """Tests for list_remotes function."""

    def test_parses_remote_names(self, mocker):
        """Test that the first column is the remote name."""
        mocker.patch(
            "jays.vcs.jj._run_command",
            return_value="origin git@github.com:me/repo.git\nupstream git@github.com:org/repo.git",
        )

        result = jj.list_remotes()

        assert result.items == ["origin", "upstream"]
        assert len(result) == 2

    def test_no_remotes(self, mocker):
        """Test that an empty remote list is EMPTY."""
        mocker.patch("jays.vcs.jj._run_command", return_value="")
        assert jj.list_remotes().status is ListStatus.EMPTY


class TestListResult:
    """Tests for ListResult constructors."""

    def test_ok_with_no_items_is_empty(self):
        """Test that ok([]) collapses to EMPTY."""
        assert ListResult.ok([]).status is ListStatus.EMPTY

    def test_error_is_falsy(self):
        """Test that an error result is falsy and has no items."""
        result = ListResult.error("boom")
        assert not result
        assert result.items == []


class TestJjCommands:
    """Tests for the command lines built by jj wrappers."""

    @pytest.fixture
    def passthrough(self, mocker):
        return mocker.patch("jays.vcs.jj._run_passthrough")

    def test_commit(self, passthrough):
        """Test that the message is passed with --message=."""
        jj.commit("fix bug")
        passthrough.assert_called_once_with(["jj", "commit", "--message=fix bug"])

    def test_move_nearest_bookmark(self, passthrough):
        """Test the revset used to find the nearest bookmark."""
        jj.move_nearest_bookmark()
        passthrough.assert_called_once_with(
            ["jj", "bookmark", "move", "--from", "heads(::@- & bookmarks())", "--to", "@-"]
        )

    def test_move_bookmark_to_parent(self, passthrough):
        """Test moving a named bookmark to @-."""
        jj.move_bookmark_to_parent("feature")
        passthrough.assert_called_once_with(
            ["jj", "bookmark", "move", "feature", "--from", "feature", "--to", "@-"]
        )

    def test_abandon_retains_bookmarks(self, passthrough):
        """Test that abandon keeps bookmarks."""
        jj.abandon()
        passthrough.assert_called_once_with(["jj", "abandon", "--retain-bookmarks"])

    def test_log_limit(self, passthrough):
        """Test that log is bounded."""
        jj.log(limit=3)
        passthrough.assert_called_once_with(["jj", "log", "--limit", "3"])

    def test_push_without_remote(self, passthrough):
        """Test pushing a bookmark without a remote filter."""
        jj.push_bookmark("feature")
        passthrough.assert_called_once_with(["jj", "git", "push", "-b", "feature"])

    def test_push_with_remote(self, passthrough):
        """Test pushing a bookmark to a specific remote."""
        jj.push_bookmark("feature", "upstream")
        passthrough.assert_called_once_with(
            ["jj", "git", "push", "-b", "feature", "--remote", "upstream"]
        )

    def test_init_plain(self, passthrough):
        """Test standalone initialization."""
        jj.init_repo()
        passthrough.assert_called_once_with(["jj", "git", "init"])

    def test_init_colocated(self, passthrough):
        """Test colocated initialization."""
        jj.init_repo(colocate=True)
        passthrough.assert_called_once_with(["jj", "git", "init", "--colocate"])

    def test_init_linked(self, passthrough):
        """Test linking to an existing Git repository."""
        jj.init_repo(git_repo=".")
        passthrough.assert_called_once_with(["jj", "git", "init", "--git-repo", "."])


class TestGit:
    """Tests for git wrappers."""

    def test_current_branch(self, mocker):
        """Test that the branch name is returned."""
        mocker.patch("jays.vcs.git._run_command", return_value="main")
        assert git.current_branch() == "main"

    def test_current_branch_on_failure(self, mocker):
        """Test that a failure yields an empty branch name."""
        mocker.patch(
            "jays.vcs.git._run_command",
            side_effect=CommandError(["git", "branch", "--show-current"]),
        )
        assert git.current_branch() == ""

    def test_switch(self, mocker):
        """Test the switch command line."""
        passthrough = mocker.patch("jays.vcs.git._run_passthrough")
        git.switch("main")
        passthrough.assert_called_once_with(["git", "switch", "main"])


class TestGh:
    """Tests for gh wrappers."""

    def test_current_user(self, mocker):
        """Test the user lookup command line."""
        run = mocker.patch("jays.vcs.gh._run_command", return_value="alice")

        assert gh.current_user() == "alice"
        run.assert_called_once_with(["gh", "api", "user", "--jq", ".login"])

    def test_create_repo(self, mocker):
        """Test that visibility becomes a flag."""
        passthrough = mocker.patch("jays.vcs.gh._run_passthrough")
        gh.create_repo("proj", "private")
        passthrough.assert_called_once_with(["gh", "repo", "create", "proj", "--private"])

    def test_create_repo_rejects_unknown_visibility(self, mocker):
        """Test that only known visibilities are accepted."""
        mocker.patch("jays.vcs.gh._run_passthrough")
        with pytest.raises(ValueError):
            gh.create_repo("proj", "internal")

    def test_is_authenticated(self, mocker):
        """Test the auth status check."""
        succeeds = mocker.patch("jays.vcs.gh._command_succeeds", return_value=True)
        assert gh.is_authenticated() is True
        succeeds.assert_called_once_with(["gh", "auth", "status"])
