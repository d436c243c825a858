"""Tests for IdentityStoreClient.

Validates the membership-removal operations with default identity_store_id
fallback and classified errors.
"""

import pytest

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestIdentityStoreClient:
    """Test suite for IdentityStoreClient."""

    def _client(self, fake, store_id="store-1234567890"):
        return IdentityStoreClient(
            session_provider=SessionProvider(region="us-east-1"),
            default_identity_store_id=store_id,
            client=fake,
        )

    def test_init_with_default_identity_store_id(self):
        client = self._client(fake=None)
        assert client._default_identity_store_id == "store-1234567890"

    def test_boto3_client_created_once(self, monkeypatch, make_fake_client):
        created = []

        def mock_boto3_client(service_name, session_config=None, client_config=None):
            created.append(service_name)
            return make_fake_client(
                api_responses={
                    "get_user_id": {"UserId": "U1"},
                    "get_group_membership_id": {"MembershipId": "M1"},
                }
            )

        monkeypatch.setattr(executor, "get_boto3_client", mock_boto3_client)
        client = IdentityStoreClient(
            session_provider=SessionProvider(region="us-east-1"),
            default_identity_store_id="store-1234567890",
        )

        client.get_user_id_by_username("jdoe")
        client.get_group_membership_id("group-1", {"UserId": "U1"})

        assert created == ["identitystore"]

    def test_get_user_id_by_username_request(self, make_fake_client):
        fake = make_fake_client(api_responses={"get_user_id": {"UserId": "U1"}})

        result = self._client(fake).get_user_id_by_username("jdoe")

        assert result.is_success
        assert result.data == {"UserId": "U1"}
        assert fake.calls == [
            (
                "get_user_id",
                {
                    "IdentityStoreId": "store-1234567890",
                    "AlternateIdentifier": {
                        "UniqueAttribute": {
                            "AttributePath": "userName",
                            "AttributeValue": "jdoe",
                        }
                    },
                },
            )
        ]

    def test_identity_store_id_override(self, make_fake_client):
        fake = make_fake_client(
            api_responses={"get_group_membership_id": {"MembershipId": "M1"}}
        )

        self._client(fake).get_group_membership_id(
            "group-1", {"UserId": "U1"}, identity_store_id="d-override"
        )

        assert fake.calls[0][1] == {
            "IdentityStoreId": "d-override",
            "GroupId": "group-1",
            "MemberId": {"UserId": "U1"},
        }

    def test_delete_group_membership_request(self, make_fake_client):
        fake = make_fake_client(api_responses={"delete_group_membership": {}})

        result = self._client(fake).delete_group_membership("M1")

        assert result.is_success
        assert fake.calls == [
            (
                "delete_group_membership",
                {"IdentityStoreId": "store-1234567890", "MembershipId": "M1"},
            )
        ]

    def test_not_found_is_reported(self, make_fake_client, make_client_error):
        fake = make_fake_client(
            api_responses={
                "delete_group_membership": make_client_error(
                    "ResourceNotFoundException"
                )
            }
        )

        result = self._client(fake).delete_group_membership("M1")

        assert result.status == OperationStatus.NOT_FOUND

    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.get_user_id_by_username("jdoe"),
            lambda c: c.get_group_membership_id("group-1", {"UserId": "U1"}),
            lambda c: c.delete_group_membership("M1"),
        ],
    )
    def test_missing_store_id_returns_error(self, call, make_fake_client):
        fake = make_fake_client()

        result = call(self._client(fake, store_id=None))

        assert not result.is_success
        assert result.error_code == "MISSING_IDENTITY_STORE_ID"
        assert fake.calls == []
