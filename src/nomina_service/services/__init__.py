"""Nómina services."""

from nomina_service.services.ingestion_service import (
    IngestionError,
    IngestionService,
    IngestionSummary,
    generate_external_id,
)
from nomina_service.services.schema_provisioner import SchemaProvisioner

__all__ = [
    "IngestionError",
    "IngestionService",
    "IngestionSummary",
    "generate_external_id",
    "SchemaProvisioner",
]
