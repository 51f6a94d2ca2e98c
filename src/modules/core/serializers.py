"""Shared DRF serializers (OpenAPI documentation of common payloads)."""

from __future__ import annotations

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Shape of ``ErrorResponseDTO`` as rendered by the exception handler."""

    timestamp = serializers.DateTimeField()
    status = serializers.IntegerField()
    error = serializers.CharField()
    message = serializers.CharField()
    path = serializers.CharField()
