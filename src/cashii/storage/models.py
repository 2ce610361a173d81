"""SQLAlchemy models for the cashii ledger database."""

from sqlalchemy import Column, Date, Integer, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class TransactionRow(Base):
    """Transaction template model.

    ``position`` preserves ledger order, which is also the transaction ID
    shown to users.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, index=True)
    memo = Column(String, nullable=True)
    # Exact decimal text; SQLite has no lossless numeric type
    amount = Column(String, nullable=True)
    date = Column(Date, nullable=True)
    trigger = Column(String, nullable=False, default="ONCE")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
