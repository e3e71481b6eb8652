import pytest

from core.errors import ValidationError
from core.paths import join_posix, normalize_posix_relpath
from clients.github.inputs import (
    is_absolute_url,
    parse_repo,
    normalize_path,
)


def test_parse_repo_valid_variants():
    assert parse_repo("octocat/Hello-World") == ("octocat", "Hello-World")
    assert parse_repo(" octocat/Hello-World ") == ("octocat", "Hello-World")
    assert parse_repo("https://github.com/octocat/Hello-World") == ("octocat", "Hello-World")
    assert parse_repo("https://github.com/octocat/Hello-World/") == ("octocat", "Hello-World")
    assert parse_repo("https://github.com/octocat/Hello-World.git") == ("octocat", "Hello-World")


def test_parse_repo_invalid():
    with pytest.raises(ValidationError):
        parse_repo("not a repo")
    with pytest.raises(ValidationError):
        parse_repo("https://gitlab.com/a/b")
    with pytest.raises(ValidationError):
        parse_repo(None)


def test_normalize_path():
    assert normalize_path(" /transcripts/latest.md ") == "transcripts/latest.md"
    assert normalize_path("./transcripts/alpha/") == "transcripts/alpha"
    assert normalize_path("transcripts\\alpha") == "transcripts/alpha"
    with pytest.raises(ValidationError):
        normalize_path("")
    with pytest.raises(ValidationError):
        normalize_path("/")


def test_is_absolute_url():
    assert is_absolute_url("https://api.github.com/repos/a/b/contents/x")
    assert is_absolute_url("HTTP://example.com")
    assert not is_absolute_url("transcripts/alpha")


def test_join_posix_drops_empty_segments():
    assert join_posix("transcripts", "", "/alpha/", "latest.md") == "transcripts/alpha/latest.md"
    assert normalize_posix_relpath("  ") == ""
