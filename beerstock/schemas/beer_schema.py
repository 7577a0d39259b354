from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from beerstock.models.beer_type import BeerType


# 맥주 기본 스키마
class BeerBase(BaseModel):
    # 공백만 있는 이름/브랜드는 빈 값으로 처리
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    brand: str = Field(min_length=1, max_length=200)
    max: int = Field(gt=0, le=500)
    quantity: int = Field(ge=0, le=100)
    type: BeerType

    # 종류 문자열을 명시적으로 파싱 (대소문자 무시)
    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, value):
        return BeerType.parse(value)


# 맥주 등록 스키마
class BeerCreate(BeerBase):
    # 등록 시 수량은 최대치를 넘을 수 없음
    @model_validator(mode="after")
    def check_quantity_within_max(self):
        if self.quantity > self.max:
            raise ValueError(f"quantity ({self.quantity}) must not exceed max ({self.max})")
        return self


# 맥주 응답 스키마
class BeerResponse(BeerBase):
    id: int

    # 저장된 레코드는 등록 한도와 무관하게 그대로 응답
    quantity: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True)


# 입고/출고 수량 스키마
class QuantityRequest(BaseModel):
    quantity: int = Field(ge=0, le=100)
