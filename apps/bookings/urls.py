"""URL routing for the booking domain.

Lifecycle actions are exposed as detail routes: ``{id}/cancel/``,
``{id}/confirm/``, ``{id}/complete/`` and ``{id}/reschedule/``.
"""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import BookingViewSet

router = SimpleRouter()
router.register(r"", BookingViewSet, basename="booking")

urlpatterns = [
    path("", include(router.urls)),
]
