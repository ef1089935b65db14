# ibcfrec

`ibcfrec` predicts how a user would rate a film. It uses item-based collaborative filtering with cosine similarity between films. It has no dependencies outside the standard library.

## How it works

1. Training ratings (`user_id film_id rating`) are grouped by film and then by user.
2. The mean rating of each film is computed. Each rating then has its film's mean subtracted.
3. To predict a film's rating for a user, the film is compared with every other film that the user has rated. Cosine similarity is computed over the mean-centred ratings of the users who rated both films. The similarity is 0 in three cases:
   - either film has fewer than 5 ratings;
   - fewer than 7 users rated both films;
   - the vectors are near zero.
4. Only films with positive similarity are kept, sorted from most to least similar, and the first `k` are used. The prediction is the target film's mean plus the weighted average of the user's centred ratings on those films, with the similarities as weights. When no film qualifies, the prediction is the film's mean. A film with no training ratings has mean 0.0.

## Installation

```
pip install .
```

## Command line

```
ibcfrec
```

With no arguments, `ibcfrec` reads training ratings from `data/public_training_data.txt` and queries from `data/public_test_data.txt`, both relative to the current directory. It prints one predicted rating per query, with up to six significant digits.

- Each training line has the form `user_id film_id rating`.
- Each query line has the form `user_id film_id`.
- Blank lines are ignored.
- A line with too few fields, or with fields that are not numbers, raises `ValueError`.
- If either file cannot be opened, the command prints `Error opening input files.` to standard error and exits with status 1.

Options:

- `--train PATH` sets the training ratings file.
- `--test PATH` sets the query file.
- `-k N` sets the number of neighbouring films to use. The default is 40. A value of 0 or less uses every qualifying film.
- `--stdin` reads one stream from standard input instead of the two files.
  - Training lines are read only when the first line is `train dataset`. They run up to a `test dataset` line.
  - All lines after that are queries.
  - If the first line is anything else, no training data is read, and the lines after the first are all treated as queries.

Run `ibcfrec --help` to see the options.

## Library use

```python
from ibcfrec.cli import read_training
from ibcfrec.ibcf import ItemRecommender

ratings = read_training(["1 10 4.0", "2 10 3.5", "1 20 5.0"])
recommender = ItemRecommender(ratings)
print(recommender.predict(user_id=2, film_id=20, k=40))
```

### `ibcfrec.ibcf`

- `ItemRecommender(ratings)` takes raw ratings keyed by film id and then by user id. It computes the film averages and the centred ratings, which are available as the attributes `averages` and `ratings`.
- `ItemRecommender.similarity(film_a, film_b)` returns the cosine similarity between two films. The value is cached per unordered pair.
- `ItemRecommender.predict(user_id, film_id, k=40)` returns the predicted rating.
- `cosine_similarity_item(film_a, film_b)` computes the similarity of two `{user_id: rating}` mappings. It applies the thresholds described above.

### `ibcfrec.cli`

- `read_training(lines)` parses training lines into `{film_id: {user_id: rating}}`. It stops at a `test dataset` line.
- `read_queries(lines)` yields `(user_id, film_id)` pairs.
- `run_stream(lines, k)` returns the predictions for a single stream in the `--stdin` layout.
- `run_files(train_path, test_path, k)` returns the predictions for a training file and a query file.
- `main(argv)` is the command-line entry point.

### `ibcfrec.ratings`

- `compute_film_averages(data)` returns the mean rating of each film.
- `normalize_film_ratings(data, averages)` returns a copy of `data` with each film's average subtracted from its ratings.
- `make_cache_key(id1, id2)` returns an order-independent integer key for a pair of film ids.

## What it does not do

`ibcfrec` only predicts ratings. It does not:

- evaluate its predictions against known ratings;
- rank or recommend films for a user;
- save a trained model;
- update the ratings once a recommender has been built.

## Running the tests

```
pip install .[test]
pytest
```