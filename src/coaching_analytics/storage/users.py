"""Read-only user directory backed by a JSON file."""

from pathlib import Path

from coaching_analytics.models.user import User, UserRole
from coaching_analytics.storage.jsonfile import read_json

USERS_FILENAME = "users.json"


class JsonUserDirectory:
    def __init__(self, data_dir: Path):
        self.path = data_dir / USERS_FILENAME

    def _load(self) -> list[User]:
        data = read_json(self.path, {"users": []})
        return [User(**entry) for entry in data["users"]]

    def get_user(self, user_id: str) -> User | None:
        for user in self._load():
            if user.id == user_id:
                return user
        return None

    def list_users(self, roles: frozenset[UserRole] | None = None) -> list[User]:
        users = self._load()
        if roles is None:
            return users
        return [u for u in users if u.role in roles]
