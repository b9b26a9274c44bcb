"""Tests for admin registration of the hotels models."""

import pytest
from django.contrib import admin

from hotels.models import Enrollment, Hotel, Room, Ticket, TicketType


@pytest.mark.parametrize("model", [Hotel, Room, TicketType, Enrollment, Ticket])
def test_model_is_registered(model):
    assert admin.site.is_registered(model)


@pytest.mark.django_db
def test_hotel_changelist_renders(admin_client):
    response = admin_client.get("/admin/hotels/hotel/")
    assert response.status_code == 200
