"""Command line: read training ratings and print predicted ratings for queries."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from .ibcf import ItemRecommender
from .ratings import RatingTable

TRAIN_HEADER = "train dataset"
TEST_HEADER = "test dataset"
DEFAULT_K = 40
DEFAULT_TRAIN = "data/public_training_data.txt"
DEFAULT_TEST = "data/public_test_data.txt"


def _fields(line: str, count: int) -> list[str]:
    parts = line.split()
    if len(parts) < count:
        raise ValueError(f"malformed line: {line!r}")
    return parts[:count]


def read_training(lines: Iterable[str]) -> RatingTable:
    """Parse ``user film rating`` lines, stopping at a ``test dataset`` line."""
    data: RatingTable = {}
    for line in lines:
        text = line.strip()
        if text == TEST_HEADER:
            break
        if not text:
            continue
        user, film, rating = _fields(text, 3)
        try:
            data.setdefault(int(film), {})[int(user)] = float(rating)
        except ValueError as exc:
            raise ValueError(f"malformed line: {line!r}") from exc
    return data


def read_queries(lines: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield ``(user, film)`` pairs from query lines."""
    for line in lines:
        text = line.strip()
        if not text:
            continue
        user, film = _fields(text, 2)
        try:
            yield int(user), int(film)
        except ValueError as exc:
            raise ValueError(f"malformed line: {line!r}") from exc


def _predict_all(data: RatingTable, queries: Iterable[tuple[int, int]], k: int) -> Iterator[float]:
    recommender = ItemRecommender(data)
    for user, film in queries:
        yield recommender.predict(user, film, k)


def run_stream(lines: Iterable[str], k: int = DEFAULT_K) -> list[float]:
    """Predict from one stream holding a training section and then queries.

    Training is read only when the first line is ``train dataset``; the
    remaining lines are taken as queries either way.
    """
    it = iter(lines)
    header = next(it, None)
    data = read_training(it) if header is not None and header.strip() == TRAIN_HEADER else {}
    return list(_predict_all(data, read_queries(it), k))


def run_files(train_path: str, test_path: str, k: int = DEFAULT_K) -> list[float]:
    """Predict ratings for the queries in ``test_path`` from ``train_path``."""
    with open(train_path, encoding="utf-8") as train_file, open(
        test_path, encoding="utf-8"
    ) as test_file:
        data = read_training(train_file)
        return list(_predict_all(data, read_queries(test_file), k))


def _format(value: float) -> str:
    return f"{value:.6g}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ibcfrec", description=__doc__)
    parser.add_argument("--stdin", action="store_true", help="read training and queries from standard input")
    parser.add_argument("--train", default=DEFAULT_TRAIN, help="training ratings file")
    parser.add_argument("--test", default=DEFAULT_TEST, help="query file")
    parser.add_argument("-k", type=int, default=DEFAULT_K, help="number of neighbours")
    args = parser.parse_args(argv)

    if args.stdin:
        predictions = run_stream(sys.stdin, args.k)
    else:
        try:
            predictions = run_files(args.train, args.test, args.k)
        except OSError:
            print("Error opening input files.", file=sys.stderr)
            return 1

    sys.stdout.write("".join(f"{_format(p)}\n" for p in predictions))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())