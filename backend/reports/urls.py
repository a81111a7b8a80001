from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ReportViewSet

app_name = "reports"

router = DefaultRouter()
router.register(r"reports", ReportViewSet, basename="reports")

urlpatterns = [
    path("", include(router.urls)),
]
