"""Rating tables: film averages, mean-centring and similarity cache keys."""

from __future__ import annotations

from collections.abc import Mapping

RatingTable = dict[int, dict[int, float]]
"""Ratings keyed by film id, then by user id."""


def make_cache_key(id1: int, id2: int) -> int:
    """Return an order-independent key for a pair of film ids."""
    low, high = sorted((id1, id2))
    return (low << 32) | high


def compute_film_averages(data: Mapping[int, Mapping[int, float]]) -> dict[int, float]:
    """Return the mean rating of every film; a film with no ratings averages 0.0."""
    return {
        film_id: (sum(user_ratings.values()) / len(user_ratings)) if user_ratings else 0.0
        for film_id, user_ratings in data.items()
    }


def normalize_film_ratings(
    data: Mapping[int, Mapping[int, float]], averages: Mapping[int, float]
) -> RatingTable:
    """Return a copy of ``data`` with each film's average subtracted from its ratings.

    Films missing from ``averages`` are treated as having an average of 0.0.
    """
    normalized: RatingTable = {}
    for film_id, user_ratings in data.items():
        avg = averages.get(film_id, 0.0)
        normalized[film_id] = {user: rating - avg for user, rating in user_ratings.items()}
    return normalized