from beerstock.models.beer_model import Beer
from beerstock.schemas.beer_schema import BeerCreate, BeerResponse


# 등록 요청 → 저장 전 레코드 (id는 저장 시 부여)
def to_model(beer: BeerCreate) -> Beer:
    return Beer(
        name=beer.name,
        brand=beer.brand,
        max=beer.max,
        quantity=beer.quantity,
        type=beer.type,
    )


# 저장된 레코드 → 응답 스키마
def to_response(beer: Beer) -> BeerResponse:
    return BeerResponse(
        id=beer.id,
        name=beer.name,
        brand=beer.brand,
        max=beer.max,
        quantity=beer.quantity,
        type=beer.type,
    )
