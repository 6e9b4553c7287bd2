"""Subject classes (i.e. people)."""
from typing import Optional

from flask_login import UserMixin
from sqlalchemy import Boolean, Column, UnicodeText, UniqueConstraint
from sqlalchemy.types import String

from .base import IdMixin, Model, TimestampedMixin


class User(IdMixin, TimestampedMixin, UserMixin, Model):
    __tablename__ = "user"

    username = Column(UnicodeText, nullable=False)
    first_name = Column(UnicodeText, nullable=False, default="")
    last_name = Column(UnicodeText, nullable=False, default="")
    email = Column(UnicodeText, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
    can_login = Column(Boolean, nullable=False, default=True)

    #: preferred language code, `None` for site default
    lang = Column(String(10), nullable=True, default=None)

    __table_args__ = (UniqueConstraint("username"), UniqueConstraint("email"))

    @property
    def is_active(self) -> bool:
        return self.can_login

    @property
    def name(self) -> str:
        name = f"{self.first_name or ''} {self.last_name or ''}"
        return name.strip() or self.username

    def enrolment_role(self, course) -> Optional[str]:
        """Role of this user in `course`, or `None` if not enrolled."""
        for enrolment in self.enrolments:
            if enrolment.course_id == course.id:
                return enrolment.role
        return None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        cls = self.__class__
        return "<{mod}.{cls} id={id!r} username={username!r} at 0x{addr:x}>".format(
            mod=cls.__module__,
            cls=cls.__name__,
            id=self.id,
            username=self.username,
            addr=id(self),
        )
