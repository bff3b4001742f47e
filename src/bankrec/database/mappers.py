"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the ledger schema can change
without touching parsers or services.
"""

from decimal import Decimal

from bankrec.domain import entities as domain
from bankrec.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        bank_name=orm_account.bank_name,
        account_number=orm_account.account_number,
        currency=orm_account.currency,
        current_balance=Decimal(orm_account.current_balance or 0),
        created_at=orm_account.created_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        amount=Decimal(orm_transaction.amount),
        direction=domain.TransactionDirection(orm_transaction.direction),
        reference=orm_transaction.reference,
        category_id=orm_transaction.category_id,
        is_reconciled=bool(orm_transaction.is_reconciled),
        reconciled_at=orm_transaction.reconciled_at,
        imported_at=orm_transaction.imported_at,
    )
