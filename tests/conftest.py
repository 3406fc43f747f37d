"""Pytest configuration and shared fixtures."""

from typing import Optional

import pytest

from quicksight_provider.clients.quicksight_client import (
    GroupNotFoundError,
    QuickSightAPIError,
)
from quicksight_provider.models.group import QuickSightGroup
from quicksight_provider.provider import ProviderMeta

TEST_ACCOUNT_ID = "123456789012"
TEST_REGION = "us-east-1"


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture
def test_env(monkeypatch):
    """Set up test environment variables."""
    test_vars = {
        "AWS_REGION": TEST_REGION,
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


@pytest.fixture
def aws_credentials(test_env):
    """Fake credentials so moto-backed boto3 clients never reach AWS."""
    return test_env


# =============================================================================
# QuickSight Fakes
# =============================================================================

class FakeQuickSight:
    """In-memory stand-in for the QuickSight group API."""

    def __init__(self):
        self.groups: dict[tuple[str, str, str], QuickSightGroup] = {}
        self.calls: list[tuple[str, dict]] = []
        self.failures: dict[str, Exception] = {}

    def fail(self, operation: str, error: Exception) -> None:
        """Make the next calls of an operation raise ``error``."""
        self.failures[operation] = error

    def _record(self, operation: str, **kwargs) -> None:
        self.calls.append((operation, kwargs))
        if operation in self.failures:
            raise self.failures[operation]

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    @staticmethod
    def _not_found(group_name: str) -> GroupNotFoundError:
        return GroupNotFoundError(
            "An error occurred (ResourceNotFoundException): "
            f"Group {group_name} not found",
            error_code="ResourceNotFoundException",
        )

    async def create_group(
        self,
        *,
        aws_account_id: str,
        namespace: str,
        group_name: str,
        description: Optional[str] = None,
    ) -> QuickSightGroup:
        self._record(
            "create_group",
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
            description=description,
        )
        group = QuickSightGroup(
            arn=f"arn:aws:quicksight:{TEST_REGION}:{aws_account_id}:group/{namespace}/{group_name}",
            group_name=group_name,
            description=description,
            principal_id=f"group/{namespace}/{group_name}",
        )
        self.groups[(aws_account_id, namespace, group_name)] = group
        return group

    async def describe_group(
        self, *, aws_account_id: str, namespace: str, group_name: str
    ) -> QuickSightGroup:
        self._record(
            "describe_group",
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
        )
        try:
            return self.groups[(aws_account_id, namespace, group_name)]
        except KeyError:
            raise self._not_found(group_name) from None

    async def update_group(
        self,
        *,
        aws_account_id: str,
        namespace: str,
        group_name: str,
        description: Optional[str] = None,
    ) -> None:
        self._record(
            "update_group",
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
            description=description,
        )
        key = (aws_account_id, namespace, group_name)
        if key not in self.groups:
            raise self._not_found(group_name)
        if description is not None:
            self.groups[key] = self.groups[key].model_copy(update={"description": description})

    async def delete_group(
        self, *, aws_account_id: str, namespace: str, group_name: str
    ) -> None:
        self._record(
            "delete_group",
            aws_account_id=aws_account_id,
            namespace=namespace,
            group_name=group_name,
        )
        if self.groups.pop((aws_account_id, namespace, group_name), None) is None:
            raise self._not_found(group_name)


@pytest.fixture(scope="session")
def fake_quicksight_cls():
    """The fake class itself, for tests that build several instances."""
    return FakeQuickSight


@pytest.fixture
def fake_quicksight():
    """Create an empty in-memory QuickSight fake."""
    return FakeQuickSight()


@pytest.fixture
def provider_meta(fake_quicksight):
    """Provider state wired to the in-memory QuickSight fake."""
    return ProviderMeta(
        account_id=TEST_ACCOUNT_ID,
        region=TEST_REGION,
        quicksight=fake_quicksight,
    )


@pytest.fixture
def throttled_error():
    """A non-not-found API failure."""
    return QuickSightAPIError(
        "An error occurred (ThrottlingException): Rate exceeded",
        error_code="ThrottlingException",
    )
