from .theater import Theater as Theater
