from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session
from typing import Annotated, List

from beerstock.core.database import get_db
from beerstock.core.exceptions import BeerStockError, ErrorKind
from beerstock.crud.beer_crud import BeerRepository
from beerstock.schemas import beer_mapper
from beerstock.schemas.beer_schema import BeerCreate, BeerResponse, QuantityRequest
from beerstock.services.beer_service import BeerService

# 맥주 재고 API 라우터
router = APIRouter(prefix="/api/v1/beers", tags=["Beers"])

# 경로 ID (BigInteger 컬럼 범위)
BeerId = Annotated[int, Path(ge=1, le=2**63 - 1)]

# 에러 종류 → HTTP 상태 코드
STATUS_BY_KIND = {
    ErrorKind.ALREADY_REGISTERED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STOCK_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EMPTY_OR_NEGATIVE: status.HTTP_400_BAD_REQUEST,
}


# 서비스 의존성 (요청마다 세션 기반으로 생성)
def get_beer_service(db: Session = Depends(get_db)) -> BeerService:
    return BeerService(BeerRepository(db))


def _to_http(error: BeerStockError) -> HTTPException:
    return HTTPException(status_code=STATUS_BY_KIND[error.kind], detail=error.detail)


# 맥주 등록
@router.post(
    "",
    response_model=BeerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new beer",
    responses={400: {"description": "Missing required fields, wrong field range value or beer already registered"}},
)
def create_beer(beer: BeerCreate, service: BeerService = Depends(get_beer_service)):
    try:
        created = service.register(beer_mapper.to_model(beer))
    except BeerStockError as e:
        raise _to_http(e) from e
    return beer_mapper.to_response(created)


# 이름으로 조회
@router.get(
    "/{name}",
    response_model=BeerResponse,
    summary="Find a beer by name",
    responses={404: {"description": "Beer with given name not found"}},
)
def find_by_name(name: str, service: BeerService = Depends(get_beer_service)):
    try:
        beer = service.find_by_name(name)
    except BeerStockError as e:
        raise _to_http(e) from e
    return beer_mapper.to_response(beer)


# 전체 조회
@router.get("", response_model=List[BeerResponse], summary="List all registered beers")
def list_beers(service: BeerService = Depends(get_beer_service)):
    return [beer_mapper.to_response(b) for b in service.list_all()]


# ID로 삭제
@router.delete(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a beer by id",
    responses={404: {"description": "Beer with given id not found"}},
)
def delete_by_id(beer_id: BeerId, service: BeerService = Depends(get_beer_service)):
    try:
        service.delete_by_id(beer_id)
    except BeerStockError as e:
        raise _to_http(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 입고 (수량 증가)
@router.patch(
    "/{beer_id}/increment",
    response_model=BeerResponse,
    summary="Increment the stock of a beer",
    responses={
        400: {"description": "Increment would exceed the max stock capacity"},
        404: {"description": "Beer with given id not found"},
    },
)
def increment(beer_id: BeerId, body: QuantityRequest, service: BeerService = Depends(get_beer_service)):
    try:
        beer = service.increment(beer_id, body.quantity)
    except BeerStockError as e:
        raise _to_http(e) from e
    return beer_mapper.to_response(beer)


# 출고 (수량 감소)
@router.patch(
    "/{beer_id}/decrement",
    response_model=BeerResponse,
    summary="Decrement the stock of a beer",
    responses={
        400: {"description": "Decrement would leave the stock empty or negative"},
        404: {"description": "Beer with given id not found"},
    },
)
def decrement(beer_id: BeerId, body: QuantityRequest, service: BeerService = Depends(get_beer_service)):
    try:
        beer = service.decrement(beer_id, body.quantity)
    except BeerStockError as e:
        raise _to_http(e) from e
    return beer_mapper.to_response(beer)
