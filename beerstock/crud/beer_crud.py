# beerstock/crud/beer_crud.py
from typing import List, Optional

from sqlalchemy.orm import Session

from beerstock.models.beer_model import Beer


class BeerRepository:
    """SQLAlchemy-backed storage for beers, one session per instance."""

    def __init__(self, db: Session):
        self.db = db

    # READ 단일 맥주 조회 (ID 기준)
    def find_by_id(self, beer_id: int) -> Optional[Beer]:
        return self.db.query(Beer).filter(Beer.id == beer_id).first()

    # READ 단일 맥주 조회 (이름 기준)
    def find_by_name(self, name: str) -> Optional[Beer]:
        return self.db.query(Beer).filter(Beer.name == name).first()

    # READ-ALL 전체 맥주 조회
    def find_all(self) -> List[Beer]:
        return self.db.query(Beer).order_by(Beer.id).all()

    # CREATE/UPDATE 저장 (신규면 id 부여)
    def save(self, beer: Beer) -> Beer:
        self.db.add(beer)
        self.db.commit()
        self.db.refresh(beer)
        return beer

    # DELETE 맥주 삭제
    def delete_by_id(self, beer_id: int) -> None:
        beer = self.find_by_id(beer_id)
        if not beer:
            return

        self.db.delete(beer)
        self.db.commit()
