"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    hotelId = serializers.IntegerField(source="hotel_id.value")
    capacity = serializers.IntegerField(source="capacity.value")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model, without rooms."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class HotelWithRoomsSerializer(HotelSerializer):
    """Serializer for a Hotel together with its rooms."""

    Rooms = RoomSerializer(source="rooms", many=True)
