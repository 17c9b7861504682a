"""Configuration: default search window and result granularity from environment."""

from __future__ import annotations

import logging
import os

from sunmoon_tools.constants import DEFAULT_SEARCH_DAYS

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATE = 'seconds'
_TRUNCATE_CHOICES = ('seconds', 'minutes', 'hours', 'days')


def get_search_days() -> float:
    """Return the default event search window in days.

    Reads SUNMOON_SEARCH_DAYS; a missing, non-numeric or non-positive value
    falls back to DEFAULT_SEARCH_DAYS.

    Returns:
        Window length in days.
    """
    raw = os.environ.get('SUNMOON_SEARCH_DAYS', '').strip()
    if not raw:
        return DEFAULT_SEARCH_DAYS
    try:
        days = float(raw)
    except ValueError:
        logger.info('Ignoring SUNMOON_SEARCH_DAYS=%r (not a number)', raw)
        return DEFAULT_SEARCH_DAYS
    if not days > 0.0:
        logger.info('Ignoring SUNMOON_SEARCH_DAYS=%r (must be positive)', raw)
        return DEFAULT_SEARCH_DAYS
    return days


def get_truncate_unit() -> str:
    """Return the default result granularity name (SUNMOON_TRUNCATE or 'seconds').

    Returns:
        One of 'seconds', 'minutes', 'hours', 'days'.
    """
    raw = os.environ.get('SUNMOON_TRUNCATE', '').strip().lower()
    if not raw:
        return DEFAULT_TRUNCATE
    if raw not in _TRUNCATE_CHOICES:
        logger.info('Ignoring SUNMOON_TRUNCATE=%r; expected one of %s', raw, _TRUNCATE_CHOICES)
        return DEFAULT_TRUNCATE
    return raw
