"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def authenticated_client(api_client: APIClient):
    """Return a factory that authenticates the API client as a given user."""

    def _authenticate(user=None) -> APIClient:
        token = factories.generate_valid_token(user)
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return api_client

    return _authenticate


@pytest.fixture
def entitled_user(db):
    """A user holding a paid, in-person ticket that includes a hotel."""
    user = factories.create_user()
    enrollment = factories.create_enrollment(user)
    ticket_type = factories.create_ticket_type(is_remote=False, includes_hotel=True)
    factories.create_ticket(enrollment, ticket_type, status="PAID")
    return user
