from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import SQLAlchemyError
from ..models.portfolio import Portfolio
from ...core.logger import logger


class PortfolioRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, portfolio_id: int) -> Optional[Portfolio]:
        return self.db.get(Portfolio, portfolio_id)

    def list_by_user(self, user_id: int, with_investments: bool = False) -> List[Portfolio]:
        query = self.db.query(Portfolio).filter(Portfolio.user_id == user_id)
        if with_investments:
            query = query.options(selectinload(Portfolio.investments))
        return query.order_by(Portfolio.created_at.desc(), Portfolio.id.desc()).all()

    def create(self, user_id: int, name: str, description: Optional[str] = None) -> Portfolio:
        portfolio = Portfolio(user_id=user_id, name=name, description=description)
        try:
            self.db.add(portfolio)
            self.db.commit()
            self.db.refresh(portfolio)
            return portfolio
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating portfolio for user {user_id}: {e}")
            raise

    def update(self, portfolio: Portfolio, name: str, description: Optional[str]) -> Portfolio:
        portfolio.name = name
        portfolio.description = description
        try:
            self.db.commit()
            self.db.refresh(portfolio)
            return portfolio
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating portfolio {portfolio.id}: {e}")
            raise

    def delete(self, portfolio: Portfolio) -> None:
        try:
            self.db.delete(portfolio)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting portfolio {portfolio.id}: {e}")
            raise
