"""Tests for conventional commit classification."""

from __future__ import annotations

import dataclasses

import pytest

from release_prep.core.commits import (
    ParsedCommit,
    classify_commit,
    classify_commits,
    group_commits,
    parse_commit_batch,
)
from release_prep.exceptions import InputError


class TestClassifyCommit:
    """Tests for classify_commit()."""

    def test_feat_with_scope(self):
        """Parse a feat commit with scope."""
        pc = classify_commit("feat(api): add endpoint")

        assert pc.type == "feat"
        assert pc.scope == "api"
        assert pc.description == "add endpoint"
        assert not pc.breaking

    def test_simple_fix(self):
        """Parse a fix commit without scope."""
        pc = classify_commit("fix: handle null response")

        assert pc.type == "fix"
        assert pc.scope is None
        assert pc.description == "handle null response"

    def test_breaking_with_exclamation(self):
        """The ! marker flags a breaking change."""
        pc = classify_commit("fix!: critical bug")

        assert pc.breaking
        assert pc.type == "fix"
        assert pc.description == "critical bug"

    def test_breaking_with_scope_and_exclamation(self):
        """Scope and ! can be combined."""
        pc = classify_commit("feat(core)!: change config format")

        assert pc.breaking
        assert pc.scope == "core"

    def test_breaking_in_body(self):
        """BREAKING CHANGE anywhere in the message flags a breaking change."""
        pc = classify_commit("feat: new feature\n\nBREAKING CHANGE: old API removed")

        assert pc.breaking
        assert pc.description == "new feature"

    def test_type_is_lowercased(self):
        pc = classify_commit("FEAT: shout")
        assert pc.type == "feat"

    def test_description_is_trimmed(self):
        pc = classify_commit("docs:    update readme   ")
        assert pc.description == "update readme"

    def test_header_on_later_line(self):
        """The header may be on any line, not just the first."""
        pc = classify_commit("Merge pull request #12 from fork/branch\nfix(ui): align buttons")

        assert pc.type == "fix"
        assert pc.scope == "ui"
        assert pc.description == "align buttons"

    def test_non_conventional(self):
        """Messages without a header are classified as other."""
        pc = classify_commit("random text")

        assert pc == ParsedCommit(
            type="other",
            scope=None,
            description="random text",
            breaking=False,
            original="random text",
        )

    def test_non_conventional_uses_first_line(self):
        pc = classify_commit("  Updated the readme  \n\nMore details here")
        assert pc.description == "Updated the readme"

    def test_non_conventional_is_never_breaking(self):
        """Only conventional commits can be breaking."""
        pc = classify_commit("Remove old API\n\nBREAKING CHANGE: gone")

        assert pc.type == "other"
        assert not pc.breaking

    def test_empty_message(self):
        pc = classify_commit("")

        assert pc.type == "other"
        assert pc.description == ""
        assert pc.scope is None
        assert not pc.breaking

    def test_original_is_kept(self):
        message = "chore: bump deps\n\nbody"
        assert classify_commit(message).original == message

    def test_fields(self):
        """A parsed commit carries only its classified parts and the raw message."""
        names = [f.name for f in dataclasses.fields(ParsedCommit)]
        assert names == ["type", "scope", "description", "breaking", "original"]


class TestGroupCommits:
    """Tests for group_commits()."""

    def test_each_commit_in_one_bucket(self):
        """Breaking commits are not repeated under their type."""
        groups = group_commits(
            classify_commits(["feat: x", "fix: y", "feat!: breaking z", "docs: w"])
        )

        assert [pc.description for pc in groups.breaking] == ["breaking z"]
        assert [pc.description for pc in groups.feat] == ["x"]
        assert [pc.description for pc in groups.fix] == ["y"]
        assert [pc.description for pc in groups.other] == ["w"]
        assert len(groups) == 4

    def test_order_is_preserved(self):
        groups = group_commits(classify_commits(["feat: a", "fix: b", "feat: c", "feat: d"]))
        assert [pc.description for pc in groups.feat] == ["a", "c", "d"]

    def test_unknown_types_are_other(self):
        groups = group_commits(classify_commits(["perf: faster", "plain message"]))
        assert [pc.type for pc in groups.other] == ["perf", "other"]

    def test_empty(self):
        groups = group_commits([])
        assert len(groups) == 0
        assert groups.feat == ()


class TestParseCommitBatch:
    """Tests for parse_commit_batch()."""

    def test_json_array(self):
        assert parse_commit_batch('["feat: x", "fix: y"]') == ["feat: x", "fix: y"]

    @pytest.mark.parametrize("payload", [None, "", "   "])
    def test_missing_payload_is_empty(self, payload: str | None):
        assert parse_commit_batch(payload) == []

    def test_invalid_json(self):
        with pytest.raises(InputError, match="Failed to parse commits JSON"):
            parse_commit_batch("[not json")

    def test_not_an_array(self):
        with pytest.raises(InputError, match="must be an array"):
            parse_commit_batch('{"message": "feat: x"}')

    def test_non_string_item(self):
        with pytest.raises(InputError, match="item 1 must be a string"):
            parse_commit_batch('["feat: x", 42]')
