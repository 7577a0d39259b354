"""Tests for request schemas, the BeerType parser and the mapper."""

import pytest
from pydantic import ValidationError

from beerstock.models.beer_model import Beer
from beerstock.models.beer_type import BeerType
from beerstock.schemas import beer_mapper
from beerstock.schemas.beer_schema import BeerCreate, BeerResponse, QuantityRequest

from conftest import beer_payload, make_beer


class TestBeerType:
    def test_parse_ignores_case_and_whitespace(self):
        assert BeerType.parse(" ipa ") == BeerType.IPA

    def test_parse_passes_members_through(self):
        assert BeerType.parse(BeerType.ALE) is BeerType.ALE

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown beer type"):
            BeerType.parse("CIDER")

    def test_parse_rejects_non_string(self):
        with pytest.raises(ValueError):
            BeerType.parse(3)


class TestBeerCreate:
    def test_valid_payload(self):
        beer = BeerCreate(**beer_payload(type="weiss"))
        assert beer.type == BeerType.WEISS

    def test_name_and_brand_are_stripped(self):
        beer = BeerCreate(**beer_payload(name="  Brahma ", brand=" Ambev"))
        assert (beer.name, beer.brand) == ("Brahma", "Ambev")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": ""},
            {"name": "   "},
            {"brand": " \t "},
            {"brand": ""},
            {"name": "x" * 201},
            {"max": 0},
            {"max": 501},
            {"quantity": -1},
            {"quantity": 101, "max": 200},
            {"quantity": 60, "max": 50},
            {"type": "CIDER"},
        ],
    )
    def test_invalid_payload(self, overrides):
        with pytest.raises(ValidationError):
            BeerCreate(**beer_payload(**overrides))


class TestQuantityRequest:
    def test_bounds(self):
        assert QuantityRequest(quantity=0).quantity == 0
        assert QuantityRequest(quantity=100).quantity == 100
        with pytest.raises(ValidationError):
            QuantityRequest(quantity=-1)
        with pytest.raises(ValidationError):
            QuantityRequest(quantity=101)


class TestMapper:
    def test_to_model_copies_fields_without_id(self):
        beer = beer_mapper.to_model(BeerCreate(**beer_payload()))

        assert isinstance(beer, Beer)
        assert beer.id is None
        assert (beer.name, beer.brand, beer.max, beer.quantity, beer.type) == (
            "Brahma",
            "Ambev",
            50,
            10,
            BeerType.LAGER,
        )

    def test_to_response_copies_fields(self):
        response = beer_mapper.to_response(make_beer(quantity=150, max=200))

        assert response == BeerResponse(
            id=1, name="Brahma", brand="Ambev", max=200, quantity=150, type=BeerType.LAGER
        )
