from typing import List, Optional, Protocol

from beerstock.core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    EmptyOrNegativeBeerStockError,
)
from beerstock.core.logging import get_logger
from beerstock.models.beer_model import Beer

logger = get_logger(__name__)


class BeerStorage(Protocol):
    def find_by_id(self, beer_id: int) -> Optional[Beer]: ...

    def find_by_name(self, name: str) -> Optional[Beer]: ...

    def find_all(self) -> List[Beer]: ...

    def save(self, beer: Beer) -> Beer: ...

    def delete_by_id(self, beer_id: int) -> None: ...


class BeerService:
    """
    맥주 재고 비즈니스 로직 (중복 등록, 존재 확인, 수량 범위 0..max)
    """
    def __init__(self, storage: BeerStorage):
        self.storage = storage

    # CREATE 맥주 등록
    def register(self, candidate: Beer) -> Beer:
        if self.storage.find_by_name(candidate.name) is not None:
            logger.warning("beer_already_registered", name=candidate.name)
            raise BeerAlreadyRegisteredError(candidate.name)

        saved = self.storage.save(candidate)
        logger.info("beer_registered", beer_id=saved.id, name=saved.name)
        return saved

    # READ 이름으로 조회
    def find_by_name(self, name: str) -> Beer:
        beer = self.storage.find_by_name(name)
        if beer is None:
            logger.warning("beer_not_found", name=name)
            raise BeerNotFoundError.by_name(name)
        return beer

    # READ 전체 조회
    def list_all(self) -> List[Beer]:
        return list(self.storage.find_all())

    # DELETE ID로 삭제
    def delete_by_id(self, beer_id: int) -> None:
        self._verify_if_exists(beer_id)
        self.storage.delete_by_id(beer_id)
        logger.info("beer_deleted", beer_id=beer_id)

    # 입고: 수량 증가 (최대치 초과 시 거부, 기록 변경 없음)
    def increment(self, beer_id: int, quantity: int) -> Beer:
        beer = self._verify_if_exists(beer_id)
        new_quantity = beer.quantity + quantity
        if new_quantity > beer.max:
            logger.warning(
                "beer_stock_exceeded",
                beer_id=beer_id,
                current=beer.quantity,
                requested=quantity,
                max=beer.max,
            )
            raise BeerStockExceededError(beer_id, quantity)

        beer.quantity = new_quantity
        saved = self.storage.save(beer)
        logger.info("beer_stock_incremented", beer_id=beer_id, amount=quantity, quantity=saved.quantity)
        return saved

    # 출고: 수량 감소 (0 미만 시 거부, max는 확인하지 않음)
    def decrement(self, beer_id: int, quantity: int) -> Beer:
        beer = self._verify_if_exists(beer_id)
        new_quantity = beer.quantity - quantity
        if new_quantity < 0:
            logger.warning(
                "beer_stock_empty_or_negative",
                beer_id=beer_id,
                current=beer.quantity,
                requested=quantity,
            )
            raise EmptyOrNegativeBeerStockError(beer_id, quantity)

        beer.quantity = new_quantity
        saved = self.storage.save(beer)
        logger.info("beer_stock_decremented", beer_id=beer_id, amount=quantity, quantity=saved.quantity)
        return saved

    def _verify_if_exists(self, beer_id: int) -> Beer:
        beer = self.storage.find_by_id(beer_id)
        if beer is None:
            logger.warning("beer_not_found", beer_id=beer_id)
            raise BeerNotFoundError.by_id(beer_id)
        return beer
