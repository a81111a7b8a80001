from rest_framework import viewsets, filters


class BaseViewSet(viewsets.ModelViewSet):
    """
    Base ViewSet that provides standard configuration for all ModelViewSets.

    Features:
    - Standard search and ordering
    - Domain errors surface through core_backend.exceptions.floor_exception_handler

    Usage:
        class TableViewSet(BaseViewSet):
            queryset = Table.objects.all()
            serializer_class = TableSerializer
    """

    filter_backends = [
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    # Default ordering (can be overridden)
    ordering = ['id']

    def get_queryset(self):
        """
        Re-evaluate the class-level queryset on every request so results are
        never served from a queryset cached at import time.
        """
        if getattr(self, 'queryset', None) is not None:
            return self.queryset.model.objects.all()
        return super().get_queryset()


class ReadOnlyBaseViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Base ViewSet for read-only endpoints.

    Features:
    - Standard search and ordering
    - No write actions
    """

    filter_backends = [
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    ordering = ['id']
