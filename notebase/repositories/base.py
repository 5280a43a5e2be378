"""
Base Repository.

Base classes for all repositories.

Every repository receives the session factory (the connection pool
handle) at construction and opens one short-lived session per
operation. The session is closed on every exit path, which returns its
connection to the pool. Store failures surface as DatabaseError; a
missing row surfaces as NotFoundError.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notebase.core.exceptions import DatabaseError, NotFoundError
from notebase.core.logging import get_logger
from notebase.models.base import Base, is_storable_id

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class SessionRepository:
    """
    Session handling shared by all repositories.

    Subclasses run each operation inside ``self._session(...)``:

        async with self._session("rename_label") as session:
            await session.execute(...)
            await session.commit()
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        Open a session for a single operation.

        Converts SQLAlchemy exceptions to application-specific exceptions.
        Uncommitted work is rolled back when the session closes.

        Raises:
            DatabaseError: For any failure from the connection or query,
                including driver errors raised while binding parameters
        """
        try:
            async with self.session_factory() as session:
                yield session
        except IntegrityError as e:
            logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    @staticmethod
    async def _require(session: AsyncSession, model: type[Base], id: int) -> None:
        """
        Check that a row with the given id exists.

        Raises:
            NotFoundError: If no row matches
        """
        if not is_storable_id(id):
            raise NotFoundError(f"{model.__name__} {id} not found")
        result = await session.execute(select(model.id).where(model.id == id))
        if result.scalar_one_or_none() is None:
            raise NotFoundError(f"{model.__name__} {id} not found")


class BaseRepository(SessionRepository, Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses should set the model class:

        class LabelRepository(BaseRepository[Label]):
            model = Label

    Writes follow the re-fetch pattern: the row is written in one unit
    of work, then read back by id in another, so callers always get
    the persisted state rather than their own input echoed back.
    """

    model: type[ModelType]

    async def get_by_id(self, id: int) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
            DatabaseError: If the query fails
        """
        if not is_storable_id(id):
            raise NotFoundError(f"{self.model.__name__} {id} not found")

        async with self._session(f"get_{self.model.__tablename__}") as session:
            result = await session.execute(
                select(self.model).where(self.model.id == id)
            )
            instance = result.scalar_one_or_none()

        if instance is None:
            raise NotFoundError(f"{self.model.__name__} {id} not found")

        return instance

    async def list_all(self) -> list[ModelType]:
        """Get all records. Order is whatever the store returns."""
        async with self._session(f"list_{self.model.__tablename__}") as session:
            result = await session.execute(select(self.model))
            return list(result.scalars().all())

    async def _insert(self, **values: Any) -> ModelType:
        """Insert a row, then re-fetch it by its store-assigned id."""
        async with self._session(f"create_{self.model.__tablename__}") as session:
            result = await session.execute(insert(self.model).values(**values))
            new_id = result.inserted_primary_key[0]
            await session.commit()

        logger.debug(
            "Row inserted",
            extra={"table": self.model.__tablename__, "id": new_id},
        )
        return await self.get_by_id(new_id)

    async def _update(self, id: int, **values: Any) -> ModelType:
        """
        Overwrite columns on the row with the given id, then re-fetch it.

        Raises:
            NotFoundError: If no row has that id (surfaced by the re-fetch)
        """
        if not is_storable_id(id):
            raise NotFoundError(f"{self.model.__name__} {id} not found")

        async with self._session(f"update_{self.model.__tablename__}") as session:
            await session.execute(
                update(self.model).where(self.model.id == id).values(**values)
            )
            await session.commit()

        return await self.get_by_id(id)

    async def delete(self, id: int) -> None:
        """
        Delete a record by ID.

        Succeeds whether or not the row existed. Rows in dependent tables
        are removed first, in the same transaction.

        Raises:
            DatabaseError: If the delete cannot execute
        """
        if not is_storable_id(id):
            return

        async with self._session(f"delete_{self.model.__tablename__}") as session:
            await self._delete_dependents(session, id)
            result = await session.execute(
                delete(self.model).where(self.model.id == id)
            )
            deleted = result.rowcount
            await session.commit()

        logger.debug(
            "Row deleted",
            extra={"table": self.model.__tablename__, "id": id, "rows": deleted},
        )

    async def _delete_dependents(self, session: AsyncSession, id: int) -> None:
        """Hook for removing rows that reference the record being deleted."""
        return None

