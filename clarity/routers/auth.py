from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from starlette.status import HTTP_201_CREATED

from clarity.core.deps import bearer, get_current_session, get_session_service
from clarity.schemas.auth import AuthOut, LoginIn, LogoutOut, SignUpIn, UserOut
from clarity.services.session import Session, SessionService

router = APIRouter(prefix="/v1/auth", tags=["auth"])


def _auth_out(sessions: SessionService, sess: Session) -> AuthOut:
    return AuthOut(token=sess.token, user=_user_out(sessions, sess))


def _user_out(sessions: SessionService, sess: Session) -> UserOut:
    user = sessions.user_of(sess)
    return UserOut(
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        courses_count=len(sess.courses),
    )


@router.post("/signup", response_model=AuthOut, status_code=HTTP_201_CREATED)
def signup(payload: SignUpIn, sessions: SessionService = Depends(get_session_service)):
    # auto-login après inscription
    sess = sessions.sign_up(payload.email, payload.password, payload.name)
    return _auth_out(sessions, sess)


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, sessions: SessionService = Depends(get_session_service)):
    sess = sessions.login(payload.email, payload.password)
    return _auth_out(sessions, sess)


@router.post("/logout", response_model=LogoutOut)
def logout(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    sessions: SessionService = Depends(get_session_service),
):
    if creds:
        sessions.logout(creds.credentials)
    return LogoutOut(ok=True)


@router.get("/me", response_model=UserOut)
def me(
    sess: Session = Depends(get_current_session),
    sessions: SessionService = Depends(get_session_service),
):
    return _user_out(sessions, sess)
