"""Personnel records: departments and employees behind a result-composition service layer."""

__all__ = []
