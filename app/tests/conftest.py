"""Shared fixtures for the test suite.

Provides a configurable fake boto3 Identity Store client and a factory for
botocore ClientError instances.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import pytest
from botocore.exceptions import ClientError


def build_client_error(
    code: str, message: str = "boom", operation: str = "Operation"
) -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeClient:
    """Configurable fake boto3 client for unit tests.

    Each entry of `api_responses` maps a boto3 method name to either:
    - a static response dict
    - a callable receiving the call kwargs
    - an exception instance, raised when the method is called

    Every call is recorded in `calls` as (method, kwargs).
    """

    def __init__(self, api_responses: Optional[Dict[str, Any]] = None):
        self._api_responses = api_responses or {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def __getattr__(self, name: str):
        """Provide callable for API methods that returns configured responses."""
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)

        resp = self._api_responses[name]

        def _call(*_args, **kwargs):
            self.calls.append((name, kwargs))
            if isinstance(resp, BaseException):
                raise resp
            if callable(resp):
                return resp(**kwargs)
            return resp

        return _call

    def called_methods(self) -> List[str]:
        return [method for method, _ in self.calls]


class FakeIdentityStore:
    """In-memory stand-in for the identitystore API.

    Holds users by userName and memberships by (group_id, user_id); raises
    ResourceNotFoundException the way the real service does.
    """

    def __init__(
        self, users: Dict[str, str], memberships: Dict[Tuple[str, str], str]
    ):
        self.users = dict(users)
        self.memberships = dict(memberships)
        self.calls: List[str] = []

    def get_user_id(self, IdentityStoreId, AlternateIdentifier):
        self.calls.append("get_user_id")
        user_name = AlternateIdentifier["UniqueAttribute"]["AttributeValue"]
        if user_name not in self.users:
            raise build_client_error("ResourceNotFoundException", "user", "GetUserId")
        return {"UserId": self.users[user_name], "IdentityStoreId": IdentityStoreId}

    def get_group_membership_id(self, IdentityStoreId, GroupId, MemberId):
        self.calls.append("get_group_membership_id")
        key = (GroupId, MemberId["UserId"])
        if key not in self.memberships:
            raise build_client_error(
                "ResourceNotFoundException", "membership", "GetGroupMembershipId"
            )
        return {"MembershipId": self.memberships[key]}

    def delete_group_membership(self, IdentityStoreId, MembershipId):
        self.calls.append("delete_group_membership")
        for key, membership_id in list(self.memberships.items()):
            if membership_id == MembershipId:
                del self.memberships[key]
                return {}
        raise build_client_error(
            "ResourceNotFoundException", "membership", "DeleteGroupMembership"
        )


@pytest.fixture
def make_client_error():
    """Factory fixture returning botocore ClientError instances."""
    return build_client_error


@pytest.fixture
def make_fake_client():
    """Factory fixture for creating configurable fake boto3 clients.

    Usage:
        def test_something(make_fake_client):
            client = make_fake_client(api_responses={"get_user_id": {"UserId": "U1"}})
    """

    def _factory(api_responses: Optional[Dict[str, Any]] = None) -> FakeClient:
        return FakeClient(api_responses=api_responses)

    return _factory


@pytest.fixture
def make_fake_identity_store():
    """Factory fixture for a stateful in-memory Identity Store."""

    def _factory(
        users: Optional[Dict[str, str]] = None,
        memberships: Optional[Dict[Tuple[str, str], str]] = None,
    ) -> FakeIdentityStore:
        return FakeIdentityStore(users or {}, memberships or {})

    return _factory


@pytest.fixture
def action_context():
    """Framework context carrying AWS credentials in its secrets."""
    return SimpleNamespace(
        secrets={
            "AWS_ACCESS_KEY_ID": "AKIAEXAMPLE",
            "AWS_SECRET_ACCESS_KEY": "secret-example",
        }
    )


@pytest.fixture
def action_params():
    """Valid params for the removal action."""
    return {
        "userName": "jdoe",
        "identityStoreId": "d-1234567890",
        "groupId": "group-123",
        "region": "ca-central-1",
    }
