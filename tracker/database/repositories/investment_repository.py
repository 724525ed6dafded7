from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from ..models.investment import Investment
from ...core.logger import logger


class InvestmentRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, investment_id: int) -> Optional[Investment]:
        return self.db.get(Investment, investment_id)

    def list_by_portfolio(self, portfolio_id: int) -> List[Investment]:
        return (
            self.db.query(Investment)
            .filter(Investment.portfolio_id == portfolio_id)
            .order_by(Investment.created_at.desc(), Investment.id.desc())
            .all()
        )

    def create(self, portfolio_id: int, symbol: str, name: str, shares: Decimal,
               purchase_price: Decimal, purchase_date: date) -> Investment:
        investment = Investment(
            portfolio_id=portfolio_id,
            symbol=symbol,
            name=name,
            shares=shares,
            purchase_price=purchase_price,
            purchase_date=purchase_date,
        )
        try:
            self.db.add(investment)
            self.db.commit()
            self.db.refresh(investment)
            return investment
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating investment {symbol} in portfolio {portfolio_id}: {e}")
            raise

    def update(self, investment: Investment, symbol: str, name: str, shares: Decimal,
               purchase_price: Decimal, purchase_date: date) -> Investment:
        investment.symbol = symbol
        investment.name = name
        investment.shares = shares
        investment.purchase_price = purchase_price
        investment.purchase_date = purchase_date
        try:
            self.db.commit()
            self.db.refresh(investment)
            return investment
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating investment {investment.id}: {e}")
            raise

    def delete(self, investment: Investment) -> None:
        try:
            self.db.delete(investment)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting investment {investment.id}: {e}")
            raise
