"""Domain layer for bankrec application."""

_SERVICES = {
    "AccountService": "bankrec.domain.account",
    "CategoryService": "bankrec.domain.category",
    "TransactionService": "bankrec.domain.transaction",
    "StatementImportService": "bankrec.domain.statement_import",
    "ReconciliationService": "bankrec.domain.reconciliation",
}

__all__ = list(_SERVICES)


# Services are imported lazily: parsers and the database layer import
# bankrec.domain.entities, and services import both of them.
def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
