"""
notebase.

Persistence layer and thin HTTP service for notes and labels.

- core/: Configuration, database pool, logging, errors, HTTP plumbing
- models/: SQLAlchemy table definitions (labels, notes, notes_labels)
- repositories/: Data access for labels, notes and their association
- services/: Orchestration and validation over repositories
- schemas/: Pydantic request/response models
- api/: FastAPI routers
"""

__version__ = "0.1.0"
