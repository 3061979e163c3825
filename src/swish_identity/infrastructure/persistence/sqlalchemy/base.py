"""SQLAlchemy declarative base for swish_identity models.

Uses the same metadata as swish's Base so one ``create_all`` covers every table.
"""

from swish.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
