"""Item-based collaborative filtering rating prediction with cosine similarity."""

__version__ = "0.1.0"