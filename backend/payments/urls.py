from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import SettlementViewSet

app_name = "payments"

router = DefaultRouter()
router.register(r"payments/tables", SettlementViewSet, basename="settlement")

urlpatterns = [
    path("", include(router.urls)),
]
