"""
Core backend base components.

This package provides foundational classes that the floor apps build their
API layer on, for consistency and maintainability.
"""

from .viewsets import BaseViewSet, ReadOnlyBaseViewSet
from .serializers import (
    BaseModelSerializer,
    TimestampedSerializer
)

__all__ = [
    # ViewSets
    'BaseViewSet',
    'ReadOnlyBaseViewSet',

    # Serializers
    'BaseModelSerializer',
    'TimestampedSerializer',
]
