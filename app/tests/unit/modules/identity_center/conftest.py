"""Fixtures for Identity Center action tests."""

import pytest

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.clients.aws.session_provider import SessionProvider


@pytest.fixture
def make_identity_store_client():
    """Wrap a fake boto3 client in an IdentityStoreClient."""

    def _factory(fake) -> IdentityStoreClient:
        return IdentityStoreClient(
            session_provider=SessionProvider(region="us-east-1"),
            default_identity_store_id="d-1234567890",
            client=fake,
        )

    return _factory


@pytest.fixture
def install_boto3_client(monkeypatch):
    """Make every boto3 client built by the action return `fake`.

    Returns the list of service names requested, one entry per client built.
    """
    created = []

    def _install(fake):
        def mock_boto3_client(service_name, session_config=None, client_config=None):
            created.append(service_name)
            return fake

        monkeypatch.setattr(executor, "get_boto3_client", mock_boto3_client)
        return created

    return _install
