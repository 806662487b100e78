# Core module - config, database, errors, logging
from adgen.core.config import settings
from adgen.core.database import Base, SessionLocal
from adgen.core.exceptions import (
    GenerationError, ConfigurationError, ConflictError, StorageError
)
