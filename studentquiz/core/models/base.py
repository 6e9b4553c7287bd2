""""""
from sqlalchemy.schema import Column
from sqlalchemy.types import DateTime, Integer

from studentquiz.core.extensions import db
from studentquiz.core.util import utcnow


#: Base Model class.
class Model(db.Model):
    __abstract__ = True


class IdMixin:
    id = Column(Integer, primary_key=True)


class TimestampedMixin:
    #: creation date
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    #: last modification date
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
