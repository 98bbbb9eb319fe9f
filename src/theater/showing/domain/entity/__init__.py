from .showing import Showing as Showing
