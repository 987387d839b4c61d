"""Tests for git log parsing."""

from relnotes.extraction import split_commits


def test_split_commits_returns_one_body_per_entry(sample_log):
    """Test every entry yields its trimmed message, in order."""
    commits = split_commits(sample_log)

    assert commits == [
        "Add export command\n\nSupports CSV and JSON output.",
        "Merge branch 'fix/empty-config'",
        "Fix crash when the config file is empty",
    ]


def test_split_commits_two_entries(two_commit_log):
    assert split_commits(two_commit_log) == ["Add release notes command", "Fix tag ordering"]


def test_split_commits_generated_entries():
    """Test N well-formed entries give N messages."""
    entries = [
        f"commit {i:040x}\nAuthor: A <a@example.com>\nDate:   Mon Oct 19 10:00:0{i} 2026 +0000\n\n    message {i}\n"
        for i in range(1, 6)
    ]

    commits = split_commits("\n".join(entries))

    assert commits == [f"message {i}" for i in range(1, 6)]


def test_split_commits_keeps_message_mentioning_commit():
    """Test indented lines starting with 'commit' do not end the body."""
    log = (
        "commit 0123456789abcdef0123456789abcdef01234567\n"
        "Author: A <a@example.com>\n"
        "Date:   Mon Oct 19 10:00:00 2026 +0000\n"
        "\n"
        "    Revert previous change\n"
        "\n"
        "    commit 89abcdef01 broke the build.\n"
    )

    assert split_commits(log) == ["Revert previous change\n\ncommit 89abcdef01 broke the build."]


def test_split_commits_without_trailing_newline(two_commit_log):
    log = two_commit_log.rstrip("\n")

    assert split_commits(log)[-1] == "Fix tag ordering"


def test_split_commits_no_entries():
    """Test text without log entries gives an empty list."""
    assert split_commits("") == []
    assert split_commits("Already up to date.\n") == []
    assert split_commits("commit abcdef1\nAuthor: A <a@example.com>\n") == []
