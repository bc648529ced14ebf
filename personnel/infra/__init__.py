"""Infrastructure helpers such as Unit of Work implementations."""

from .unit_of_work import SqlAlchemyUnitOfWork, UnitOfWork, UnitOfWorkFactory, transactional

__all__ = ["UnitOfWork", "UnitOfWorkFactory", "SqlAlchemyUnitOfWork", "transactional"]
