""""""
from typing import Optional

from flask_login import AnonymousUserMixin, LoginManager


class AnonymousUser(AnonymousUserMixin):
    id = None
    is_admin = False
    lang = None

    def enrolment_role(self, course) -> Optional[str]:
        return None


login_manager = LoginManager()
login_manager.anonymous_user = AnonymousUser


@login_manager.user_loader
def load_user(user_id: str):
    from studentquiz.core.extensions import db
    from studentquiz.core.models.subjects import User

    try:
        return db.session.get(User, int(user_id))
    except ValueError:
        return None
