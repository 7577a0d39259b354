from beerstock.models.beer_type import BeerType
from beerstock.models.beer_model import Beer

__all__ = ["Beer", "BeerType"]
