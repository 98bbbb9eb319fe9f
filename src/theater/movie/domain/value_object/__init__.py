from .movie import SPECIAL_MOVIE_CODE as SPECIAL_MOVIE_CODE
from .movie import Movie as Movie
