"""User directory used by the booking engine."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore

from shared.domain.errors import NotFound


def find_user_by_id(user_id):
    """Return the active user with the given id or raise NotFound."""

    user_model = get_user_model()
    try:
        return user_model.objects.get(pk=user_id, is_active=True)
    except (user_model.DoesNotExist, ValueError, TypeError):
        raise NotFound("User not found") from None
