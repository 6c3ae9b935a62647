"""Idempotent creation of the service tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Table

from nomina_service.models import Employee, PayrollEntry

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

# Parent before child: nominas references empleados.id
PROVISION_ORDER: tuple[Table, ...] = (Employee.__table__, PayrollEntry.__table__)


class SchemaProvisioner:
    """Creates missing tables on startup. Never migrates, never raises."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    def _log_diagnostics(self, exc: Exception) -> None:
        url = self.engine.url
        logger.error("Database connection error: %s", exc)
        logger.error(
            "Configuration: host=%s port=%s user=%s database=%s",
            url.host,
            url.port,
            url.username,
            url.database or "NOT CONFIGURED",
        )
        logger.error(
            "Check that the database server is running and reachable, "
            "that .env exists and holds the right credentials, "
            "and that the configured database exists"
        )

    async def ensure_schema(self) -> bool:
        """Create each table if absent.

        Returns True when every table is in place. Failures are logged and
        the remaining tables are still attempted.
        """
        try:
            async with self.engine.connect():
                logger.info("Connected to database: %s", self.engine.url.database)
        except Exception as e:
            self._log_diagnostics(e)
            return False

        ok = True
        for table in PROVISION_ORDER:
            try:
                async with self.engine.begin() as conn:
                    await conn.run_sync(table.create, checkfirst=True)
            except Exception as e:
                ok = False
                logger.error("Error verifying table '%s': %s", table.name, e)
                continue
            logger.info("Table '%s' verified", table.name)
        return ok
