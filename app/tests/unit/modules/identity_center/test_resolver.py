"""Tests for resolve_user_id."""

import pytest

from infrastructure.operations.status import OperationStatus
from modules.identity_center.resolver import resolve_user_id


@pytest.mark.unit
class TestResolveUserId:
    def test_returns_user_id_unchanged(
        self, make_fake_client, make_identity_store_client
    ):
        fake = make_fake_client(
            api_responses={"get_user_id": {"UserId": "906722b2-0071-7052-4b4a"}}
        )

        result = resolve_user_id(
            make_identity_store_client(fake), "d-1234567890", "jdoe"
        )

        assert result.is_success
        assert result.data == "906722b2-0071-7052-4b4a"
        assert fake.called_methods() == ["get_user_id"]

    def test_user_not_found_is_fatal(
        self, make_fake_client, make_client_error, make_identity_store_client
    ):
        fake = make_fake_client(
            api_responses={
                "get_user_id": make_client_error("ResourceNotFoundException")
            }
        )

        result = resolve_user_id(
            make_identity_store_client(fake), "d-1234567890", "ghost"
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "User not found: ghost"

    @pytest.mark.parametrize(
        "code", ["ThrottlingException", "ServiceUnavailableException"]
    )
    def test_transient_failure_is_retryable(
        self, code, make_fake_client, make_client_error, make_identity_store_client
    ):
        fake = make_fake_client(
            api_responses={"get_user_id": make_client_error(code, "slow down")}
        )

        result = resolve_user_id(
            make_identity_store_client(fake), "d-1234567890", "jdoe"
        )

        assert result.is_retryable
        assert result.message == "AWS service temporarily unavailable: slow down"

    def test_other_failure_is_fatal_with_context(
        self, make_fake_client, make_client_error, make_identity_store_client
    ):
        fake = make_fake_client(
            api_responses={
                "get_user_id": make_client_error("AccessDeniedException", "denied")
            }
        )

        result = resolve_user_id(
            make_identity_store_client(fake), "d-1234567890", "jdoe"
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "Failed to get user ID for jdoe: denied"

    def test_response_without_user_id_is_fatal(
        self, make_fake_client, make_identity_store_client
    ):
        fake = make_fake_client(api_responses={"get_user_id": {}})

        result = resolve_user_id(
            make_identity_store_client(fake), "d-1234567890", "jdoe"
        )

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message.startswith("Failed to get user ID for jdoe: ")
