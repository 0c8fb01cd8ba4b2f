import logging

from flask_login import UserMixin

from models.store import get_store, new_id

logger = logging.getLogger(__name__)

ROLES = ("admin", "donor", "staff")
PROTECTED_USERNAME = "admin"


class User(UserMixin):
    def __init__(self, id, username, role, name):
        self.id = id
        self.username = username
        self.role = role
        self.name = name

    @property
    def is_protected(self):
        return self.username == PROTECTED_USERNAME

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "name": self.name,
        }

    @staticmethod
    def from_dict(data):
        if data is None:
            return None
        return User(
            id=str(data["id"]),
            username=data["username"],
            role=data["role"],
            name=data.get("name", ""),
        )

    @staticmethod
    def get_all():
        return list(get_store().users)

    @staticmethod
    def get_by_id(user_id):
        for user in get_store().users:
            if user.id == user_id:
                return user
        return None

    @staticmethod
    def get_by_username(username):
        for user in get_store().users:
            if user.username == username:
                return user
        return None

    @staticmethod
    def create(username, name, role="staff"):
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role}")
        user = User(id=new_id(), username=username, role=role, name=name)
        store = get_store()
        with store.lock:
            store.users.append(user)
        logger.info("Created user %s (role=%s)", username, role)
        return user

    @staticmethod
    def delete(user_id):
        """Remove a user. Returns False when nothing was removed."""
        store = get_store()
        with store.lock:
            user = User.get_by_id(user_id)
            if user is None:
                return False
            if user.is_protected:
                logger.warning("Refused to delete protected user %s", user.username)
                return False
            store.users = [u for u in store.users if u.id != user_id]
        logger.info("Deleted user %s", user.username)
        return True
