import logging
import secrets
from dataclasses import dataclass, field
from typing import Dict, List

from clarity.core.errors import AuthError, ValidationError
from clarity.models.course import Course, CourseStats
from clarity.services.store import User, UserStore
from clarity.utils.text_utils import mean

logger = logging.getLogger(__name__)


def workload_label(avg_difficulty: float) -> str:
    # seuils appliqués à la moyenne arrondie à 1 décimale (affichage "x.x/10")
    rounded = round(avg_difficulty, 1)
    if rounded < 5:
        return "Manageable"
    if rounded < 7:
        return "Moderate"
    return "Challenging"


@dataclass
class Session:
    token: str
    email: str
    courses: List[Course] = field(default_factory=list)


class SessionService:
    """
    Sessions actives (token -> liste de cours de travail) au-dessus du UserStore.
    - chaque modification de la liste est recopiée dans le User stocké
    - logout fait un dernier snapshot avant de fermer la session
    Aucun verrou : deux uploads simultanés sur la même session ne sont pas coordonnés.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store
        self._sessions: Dict[str, Session] = {}

    # ---------- auth ----------

    def sign_up(self, email: str, password: str, name: str) -> Session:
        if not email or not password:
            raise ValidationError("Please fill in all fields")
        if not name:
            raise ValidationError("Please enter your name")
        if self.store.exists(email):
            raise AuthError("User already exists. Please login.")

        user = self.store.add(User(email=email, password=password, name=name))
        logger.info("sign up: %s", user.email)
        return self._open(user)

    def login(self, email: str, password: str) -> Session:
        if not email or not password:
            raise ValidationError("Please fill in all fields")

        user = self.store.get(email)
        if user is None:
            raise AuthError("User not found. Please sign up first.")
        if user.password != password:
            raise AuthError("Incorrect password")

        logger.info("login: %s (%d courses)", user.email, len(user.courses))
        return self._open(user)

    def logout(self, token: str) -> None:
        sess = self._sessions.pop(token, None)
        if sess is None:
            return
        self.store.save_courses(sess.email, sess.courses)
        logger.info("logout: %s", sess.email)

    def get(self, token: str) -> Session:
        sess = self._sessions.get(token)
        if sess is None:
            raise AuthError("Not authenticated")
        return sess

    def user_of(self, sess: Session) -> User:
        user = self.store.get(sess.email)
        if user is None:
            raise AuthError("User not found. Please sign up first.")
        return user

    # ---------- cours ----------

    def add_course(self, sess: Session, course: Course) -> Course:
        sess.courses = [*sess.courses, course]
        self.store.save_courses(sess.email, sess.courses)
        return course

    def remove_course(self, sess: Session, course_id: str) -> bool:
        idx = next((i for i, c in enumerate(sess.courses) if c.id == course_id), None)
        if idx is None:
            return False
        sess.courses = sess.courses[:idx] + sess.courses[idx + 1:]
        self.store.save_courses(sess.email, sess.courses)
        return True

    def stats(self, sess: Session) -> CourseStats:
        hours = [c.hoursPerWeek for c in sess.courses]
        avg_difficulty = mean(c.difficulty for c in sess.courses)
        return CourseStats(
            count=len(sess.courses),
            totalHours=sum(hours),
            averageHours=mean(hours),
            averageDifficulty=avg_difficulty,
            workload=workload_label(avg_difficulty),
        )

    # ---------- internals ----------

    def _open(self, user: User) -> Session:
        token = secrets.token_urlsafe(32)
        sess = Session(token=token, email=user.email, courses=list(user.courses))
        self._sessions[token] = sess
        return sess
