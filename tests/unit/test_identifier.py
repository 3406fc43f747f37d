"""Unit tests for the group identifier helpers."""

import pytest

from quicksight_provider.resource.identifier import (
    GroupID,
    GroupIDFormatError,
    format_group_id,
    parse_group_id,
)


class TestFormatGroupId:
    """Tests for format_group_id."""

    def test_joins_parts_with_slash(self):
        assert format_group_id("123456789012", "default", "analysts") == (
            "123456789012/default/analysts"
        )

    def test_group_id_str_matches_format(self):
        group_id = GroupID("123456789012", "finance", "admins")
        assert str(group_id) == "123456789012/finance/admins"


class TestParseGroupId:
    """Tests for parse_group_id."""

    def test_parses_three_parts(self):
        group_id = parse_group_id("123456789012/default/analysts")

        assert group_id == GroupID("123456789012", "default", "analysts")
        assert group_id.aws_account_id == "123456789012"
        assert group_id.namespace == "default"
        assert group_id.group_name == "analysts"

    def test_unpacks_as_tuple(self):
        account, namespace, name = parse_group_id("111122223333/ns.1/team_a")
        assert (account, namespace, name) == ("111122223333", "ns.1", "team_a")

    def test_extra_separators_belong_to_group_name(self):
        group_id = parse_group_id("123456789012/default/a/b")
        assert group_id.group_name == "a/b"

    @pytest.mark.parametrize(
        "resource_id",
        [
            "",
            "noslashes",
            "123456789012/default",
            "123456789012//analysts",
            "123456789012/default/",
            "/default/analysts",
            "//",
        ],
    )
    def test_rejects_malformed_ids(self, resource_id):
        with pytest.raises(GroupIDFormatError) as exc_info:
            parse_group_id(resource_id)

        assert exc_info.value.resource_id == resource_id
        assert "expected AWS_ACCOUNT_ID/NAMESPACE/GROUP_NAME" in str(exc_info.value)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_group_id("bad-id")
