"""Unit tests for the Resource lifecycle driver."""

import pytest

from quicksight_provider.models.diagnostics import has_error
from quicksight_provider.models.state import ResourceState
from quicksight_provider.resource.base import Resource, import_state_passthrough
from quicksight_provider.resource.data import ResourceData
from quicksight_provider.resource.group import (
    GROUP_SCHEMA,
    RESOURCE_TYPE,
    resource_group,
)
from quicksight_provider.utils.correlation import get_correlation_id

ACCOUNT = "123456789012"


def _stored(resource_id=f"{ACCOUNT}/default/analysts", **overrides):
    attributes = {
        "arn": f"arn:aws:quicksight:us-east-1:{ACCOUNT}:group/default/analysts",
        "aws_account_id": ACCOUNT,
        "description": "BI team",
        "group_name": "analysts",
        "namespace": "default",
    }
    attributes.update(overrides)
    return ResourceState(type_name=RESOURCE_TYPE, id=resource_id, attributes=attributes)


class TestApplyCreate:
    """Tests for Resource.apply_create."""

    @pytest.mark.asyncio
    async def test_create_and_snapshot(self, provider_meta, fake_quicksight):
        data, diags = await resource_group().apply_create({"group_name": "analysts"}, provider_meta)

        assert diags == []
        state = data.to_state()
        assert state.type_name == RESOURCE_TYPE
        assert state.id == f"{ACCOUNT}/default/analysts"
        assert state.attributes["namespace"] == "default"

    @pytest.mark.asyncio
    async def test_invalid_config_skips_handler(self, provider_meta, fake_quicksight):
        data, diags = await resource_group().apply_create(
            {"group_name": "analysts", "namespace": "bad namespace"}, provider_meta
        )

        assert has_error(diags)
        assert diags[0].attribute == "namespace"
        assert fake_quicksight.calls == []
        assert data.to_state() is None

    @pytest.mark.asyncio
    async def test_missing_group_name_skips_handler(self, provider_meta, fake_quicksight):
        _, diags = await resource_group().apply_create({}, provider_meta)

        assert has_error(diags)
        assert fake_quicksight.calls == []

    @pytest.mark.asyncio
    async def test_account_with_slash_skips_handler(self, provider_meta, fake_quicksight):
        data, diags = await resource_group().apply_create(
            {"group_name": "g", "aws_account_id": "12/34"}, provider_meta
        )

        assert has_error(diags)
        assert diags[0].attribute == "aws_account_id"
        assert fake_quicksight.calls == []
        assert fake_quicksight.groups == {}
        assert data.to_state() is None

    @pytest.mark.asyncio
    async def test_create_failure_has_no_state(self, provider_meta, fake_quicksight, throttled_error):
        fake_quicksight.fail("create_group", throttled_error)

        data, diags = await resource_group().apply_create({"group_name": "analysts"}, provider_meta)

        assert has_error(diags)
        assert data.to_state() is None


class TestRefresh:
    """Tests for Resource.refresh."""

    @pytest.mark.asyncio
    async def test_refresh_picks_up_remote_description(self, provider_meta, fake_quicksight):
        await fake_quicksight.create_group(
            aws_account_id=ACCOUNT, namespace="default", group_name="analysts",
            description="changed outside",
        )

        data, diags = await resource_group().refresh(_stored(), provider_meta)

        assert diags == []
        assert data.get("description") == "changed outside"

    @pytest.mark.asyncio
    async def test_refresh_of_deleted_group(self, provider_meta):
        data, diags = await resource_group().refresh(_stored(), provider_meta)

        assert diags == []
        assert data.to_state() is None


class TestApplyUpdate:
    """Tests for Resource.apply_update."""

    @pytest.mark.asyncio
    async def test_description_updated_in_place(self, provider_meta, fake_quicksight):
        await fake_quicksight.create_group(
            aws_account_id=ACCOUNT, namespace="default", group_name="analysts",
            description="BI team",
        )
        fake_quicksight.calls.clear()

        data, diags = await resource_group().apply_update(
            _stored(), {"group_name": "analysts", "description": "BI and finance"}, provider_meta
        )

        assert diags == []
        assert fake_quicksight.call_names() == ["update_group", "describe_group"]
        assert data.get("description") == "BI and finance"
        assert data.id == f"{ACCOUNT}/default/analysts"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "config, changed",
        [
            ({"group_name": "renamed"}, "group_name"),
            ({"group_name": "analysts", "namespace": "finance"}, "namespace"),
            ({"group_name": "analysts", "aws_account_id": "999999999999"}, "aws_account_id"),
        ],
    )
    async def test_immutable_change_rejected(self, provider_meta, fake_quicksight, config, changed):
        _, diags = await resource_group().apply_update(_stored(), config, provider_meta)

        assert has_error(diags)
        assert diags[0].summary == f"{RESOURCE_TYPE} ({ACCOUNT}/default/analysts) must be replaced"
        assert changed in diags[0].detail
        assert fake_quicksight.calls == []

    @pytest.mark.asyncio
    async def test_invalid_update_config(self, provider_meta, fake_quicksight):
        _, diags = await resource_group().apply_update(
            _stored(), {"group_name": "analysts", "namespace": "x" * 64}, provider_meta
        )

        assert has_error(diags)
        assert fake_quicksight.calls == []


class TestDestroy:
    """Tests for Resource.destroy."""

    @pytest.mark.asyncio
    async def test_destroy_calls_delete(self, provider_meta, fake_quicksight):
        diags = await resource_group().destroy(_stored(), provider_meta)

        assert diags == []
        assert fake_quicksight.call_names() == ["delete_group"]


class TestImportState:
    """Tests for Resource.import_state."""

    @pytest.mark.asyncio
    async def test_import_existing_group(self, provider_meta, fake_quicksight):
        await fake_quicksight.create_group(
            aws_account_id="111122223333", namespace="finance", group_name="admins",
            description="Finance admins",
        )

        data, diags = await resource_group().import_state(
            "111122223333/finance/admins", provider_meta
        )

        assert diags == []
        assert data.id == "111122223333/finance/admins"
        assert data.attributes() == {
            "arn": "arn:aws:quicksight:us-east-1:111122223333:group/finance/admins",
            "aws_account_id": "111122223333",
            "description": "Finance admins",
            "group_name": "admins",
            "namespace": "finance",
        }

    @pytest.mark.asyncio
    async def test_import_missing_group(self, provider_meta):
        data, diags = await resource_group().import_state(
            f"{ACCOUNT}/default/nobody", provider_meta
        )

        assert data is None
        assert has_error(diags)
        assert diags[0].summary == "Cannot import non-existent remote object"
        assert f"({ACCOUNT}/default/nobody)" in diags[0].detail

    @pytest.mark.asyncio
    async def test_import_malformed_id(self, provider_meta, fake_quicksight):
        data, diags = await resource_group().import_state("not-an-id", provider_meta)

        assert data is None
        assert "unexpected format of ID (not-an-id)" in diags[0].summary
        assert fake_quicksight.calls == []

    @pytest.mark.asyncio
    async def test_import_unsupported(self, provider_meta):
        resource = resource_group()
        resource.importer = None

        data, diags = await resource.import_state(f"{ACCOUNT}/default/analysts", provider_meta)

        assert data is None
        assert diags[0].summary == f"resource {RESOURCE_TYPE} doesn't support import"

    @pytest.mark.asyncio
    async def test_passthrough_keeps_id(self, provider_meta):
        data = ResourceData(GROUP_SCHEMA, resource_id="a/b/c")

        assert await import_state_passthrough(data, provider_meta) == [data]


class TestOperationCorrelation:
    """Every operation runs under a single correlation ID."""

    @pytest.mark.asyncio
    async def test_nested_read_shares_create_correlation_id(self, provider_meta):
        seen = []

        async def create(data, meta):
            seen.append(get_correlation_id())
            data.set_id("a/b/c")
            return await read(data, meta)

        async def read(data, meta):
            seen.append(get_correlation_id())
            return []

        async def noop(data, meta):
            return []

        resource = Resource(schema=GROUP_SCHEMA, create=create, read=read, update=noop, delete=noop)

        await resource.apply_create({"group_name": "g"}, provider_meta)

        assert len(seen) == 2
        assert seen[0] and seen[0] == seen[1]
        assert get_correlation_id() == ""
