from enum import Enum


# 재고 서비스 에러 종류
class ErrorKind(str, Enum):
    ALREADY_REGISTERED = "already_registered"
    NOT_FOUND = "not_found"
    STOCK_EXCEEDED = "stock_exceeded"
    EMPTY_OR_NEGATIVE = "empty_or_negative"


class BeerStockError(Exception):
    """Base class for stock service errors. ``kind`` tells the caller which one it got."""

    kind: ErrorKind

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


# 이미 등록된 이름으로 등록 시도
class BeerAlreadyRegisteredError(BeerStockError):
    kind = ErrorKind.ALREADY_REGISTERED

    def __init__(self, name: str):
        super().__init__(f"Beer with name {name} already registered in the system.")


# 이름 또는 ID로 찾을 수 없음
class BeerNotFoundError(BeerStockError):
    kind = ErrorKind.NOT_FOUND

    @classmethod
    def by_name(cls, name: str) -> "BeerNotFoundError":
        return cls(f"Beer with name {name} not found in the system.")

    @classmethod
    def by_id(cls, beer_id: int) -> "BeerNotFoundError":
        return cls(f"Beer with id {beer_id} not found in the system.")


# 입고 후 수량이 최대치를 초과
class BeerStockExceededError(BeerStockError):
    kind = ErrorKind.STOCK_EXCEEDED

    def __init__(self, beer_id: int, quantity: int):
        super().__init__(
            f"Beers with {beer_id} id to increment informed exceeds the max stock capacity: {quantity}"
        )


# 출고 후 수량이 0 미만
class EmptyOrNegativeBeerStockError(BeerStockError):
    kind = ErrorKind.EMPTY_OR_NEGATIVE

    def __init__(self, beer_id: int, quantity: int):
        super().__init__(
            f"Beer with {beer_id} id to decrement informed is empty or would become negative: {quantity}"
        )
