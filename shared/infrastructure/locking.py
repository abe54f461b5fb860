"""Row locking helpers shared by the booking and calendar services."""

from __future__ import annotations

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore


def lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic().

    SQLite ignores FOR UPDATE; there the write lock is taken by
    ``BEGIN IMMEDIATE`` (see the ``transaction_mode`` database option).
    """

    if not transaction.get_connection(queryset.db).in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset
