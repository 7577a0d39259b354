from sqlalchemy import Column, String, Integer, BigInteger, Enum
from beerstock.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from beerstock.models.beer_type import BeerType

class Beer(Base):

    __tablename__ = "beer"  # DB 테이블명 지정

    # 고유 ID, 자동 증가 (SQLite는 INTEGER PK만 자동 증가)
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 맥주 이름
    name = Column(String(200), nullable=False, unique=True)  # 필수, 중복 불가

    # 브랜드
    brand = Column(String(200), nullable=False)  # 필수 입력

    # 최대 재고 수량
    max = Column(Integer, nullable=False)

    # 현재 수량 (0 <= quantity <= max)
    quantity = Column(Integer, nullable=False)

    # 맥주 종류
    type = Column(Enum(BeerType, name="beer_type"), nullable=False)

    def __repr__(self):
        return f"<Beer id={self.id} name={self.name!r} quantity={self.quantity}/{self.max}>"
