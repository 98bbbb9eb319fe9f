from .movie_factory import MovieDetails as MovieDetails
from .movie_factory import MovieFactory as MovieFactory
