"""SQLAlchemy models for bankrec database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Enum,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from bankrec.domain.entities import TransactionDirection

Base = declarative_base()


class Account(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    bank_name = Column(String, nullable=False)
    account_number = Column(String, nullable=True)
    currency = Column(String(3), default="ZAR", nullable=False)
    current_balance = Column(Numeric(15, 2), default=0, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="account", cascade="all, delete-orphan")


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Ledger transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    direction = Column(Enum(TransactionDirection, name="transaction_direction"), nullable=False)
    reference = Column(String, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    is_reconciled = Column(Boolean, default=False, nullable=False)
    reconciled_at = Column(DateTime, nullable=True)
    imported_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Duplicate lookups filter on account and date
    __table_args__ = (Index("ix_transactions_account_date", "account_id", "date"),)

    # Relationships
    account = relationship("Account", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
