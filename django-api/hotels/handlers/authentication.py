"""DRF authentication classes for the hotels endpoints."""

from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """Token authentication using the ``Authorization: Bearer <key>`` header."""

    keyword = "Bearer"
