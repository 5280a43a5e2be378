"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories and implement business rules; the
repositories own store access and error translation.

Usage:
    from notebase.services.base import BaseService

    class LabelService(BaseService):
        def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
            super().__init__(session_factory)
            self.repo = LabelRepository(session_factory)
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notebase.core.exceptions import ValidationError
from notebase.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - Access to the connection pool handle
    - Logging context
    - Common validation patterns

    Subclasses should:
    - Call super().__init__(session_factory) in their __init__
    - Initialize repositories in __init__
    - Implement business logic methods
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize the service with the session factory.

        Args:
            session_factory: Factory handing out sessions from the shared pool
        """
        self._session_factory = session_factory
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get the session factory."""
        return self._session_factory

    def _validate_required(
        self,
        fields: dict[str, Any],
        field_names: list[str],
    ) -> None:
        """
        Validate that required fields are present and not empty.

        Args:
            fields: Dictionary of field names to values
            field_names: List of required field names

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(
                "Required fields missing",
                details={"missing_fields": missing},
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
