from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from clarity.models.course import Course


@dataclass
class User:
    email: str
    password: str  # en clair, mémoire uniquement
    name: str
    courses: List[Course] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class UserStore:
    """
    "Base" utilisateurs en mémoire : email -> User.
    Créée au démarrage (create_app), perdue à l'arrêt du process.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def get(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def exists(self, email: str) -> bool:
        return email in self._users

    def add(self, user: User) -> User:
        self._users[user.email] = user
        return user

    def save_courses(self, email: str, courses: List[Course]) -> None:
        user = self._users.get(email)
        if user is not None:
            user.courses = list(courses)

    def __len__(self) -> int:
        return len(self._users)
