"""Item-based collaborative filtering with cosine similarity."""

from __future__ import annotations

import math
from collections.abc import Mapping

from .ratings import (
    RatingTable,
    compute_film_averages,
    make_cache_key,
    normalize_film_ratings,
)

MIN_RATINGS = 5
MIN_COMMON = 7
EPSILON = 1e-9


def cosine_similarity_item(film_a: Mapping[int, float], film_b: Mapping[int, float]) -> float:
    """Cosine similarity of two films over the users who rated both.

    Returns 0.0 when either film has fewer than 5 ratings, when fewer than
    7 users rated both, or when the vectors are (near) zero.
    """
    if len(film_a) < MIN_RATINGS or len(film_b) < MIN_RATINGS:
        return 0.0

    smaller, larger = (film_a, film_b) if len(film_a) <= len(film_b) else (film_b, film_a)
    pairs = [
        (rating, larger[user]) if smaller is film_a else (larger[user], rating)
        for user, rating in smaller.items()
        if user in larger
    ]

    numerator = sum(a * b for a, b in pairs)
    denominator = math.sqrt(sum(a * a for a, _ in pairs)) * math.sqrt(sum(b * b for _, b in pairs))

    if len(pairs) < MIN_COMMON or denominator < EPSILON:
        return 0.0
    return numerator / denominator


class ItemRecommender:
    """Predicts ratings from raw user ratings keyed by film, then by user."""

    def __init__(self, ratings: Mapping[int, Mapping[int, float]]) -> None:
        self.averages: dict[int, float] = compute_film_averages(ratings)
        self.ratings: RatingTable = normalize_film_ratings(ratings, self.averages)
        self._cache: dict[int, float] = {}

    def similarity(self, film_a: int, film_b: int) -> float:
        """Cached cosine similarity between two films' mean-centred ratings."""
        key = make_cache_key(film_a, film_b)
        if key not in self._cache:
            self._cache[key] = cosine_similarity_item(
                self.ratings.get(film_a, {}), self.ratings.get(film_b, {})
            )
        return self._cache[key]

    def predict(self, user_id: int, film_id: int, k: int = 40) -> float:
        """Predict ``user_id``'s rating of ``film_id`` from its ``k`` most similar films.

        Only films the user has rated and that are positively similar count.
        A non-positive ``k`` uses every such film.
        """
        neighbours = []
        for other_id, other_ratings in self.ratings.items():
            if other_id == film_id or user_id not in other_ratings:
                continue
            sim = self.similarity(film_id, other_id)
            if sim > EPSILON:
                neighbours.append((sim, other_id))

        neighbours.sort(key=lambda pair: pair[0], reverse=True)
        if k > 0:
            neighbours = neighbours[:k]

        weighted_sum = sum(sim * self.ratings[other][user_id] for sim, other in neighbours)
        sim_sum = sum(sim for sim, _ in neighbours)

        film_mean = self.averages.get(film_id, 0.0)
        if sim_sum > EPSILON:
            return film_mean + weighted_sum / sim_sum
        return film_mean