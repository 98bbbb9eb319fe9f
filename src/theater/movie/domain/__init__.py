from .factory import MovieDetails as MovieDetails
from .factory import MovieFactory as MovieFactory
from .value_object import Movie as Movie
