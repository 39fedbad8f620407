import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user import User
from app.core.roles import Role
from app.core.exceptions import AuthenticationRequired, Conflict
from app.core.security import (
    create_access_token,
    hash_password,
    verify_password,
    SECRET_KEY,
    ALGORITHM,
)
from app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserOut,
    UserResponse,
)
from app.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


router = APIRouter(tags=["Auth"])


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    if not token:
        raise AuthenticationRequired()

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise AuthenticationRequired("Invalid token")

    user_id = payload.get("sub")
    if not user_id or not str(user_id).isdigit():
        raise AuthenticationRequired("Invalid token")

    user = db.query(User).filter(User.id == int(user_id)).first()
    if not user or not user.is_active:
        raise AuthenticationRequired("User not found")

    return user


# -------------------------
# REGISTER
# -------------------------
@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    email = payload.email.lower()

    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise Conflict("Email already registered")

    user = User(
        email=email,
        password_hash=hash_password(payload.password),
        name=payload.name,
        department=payload.department,
        role=Role.user,
    )

    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("User %s registered", user.id)
    return {"user": user}


# -------------------------
# LOGIN
# -------------------------
@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == payload.email.lower()).first()

    if not user or not user.is_active or not verify_password(payload.password, user.password_hash):
        raise AuthenticationRequired("Invalid credentials")

    token = create_access_token({
        "sub": str(user.id),
        "email": user.email,
        "role": user.role.value,
    })

    return {"user": UserOut.model_validate(user), "access_token": token}


# -------------------------
# LOGOUT
# -------------------------
@router.post("/logout", response_model=MessageResponse)
def logout():
    # tokens are stateless, the client drops its copy
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return {"user": current_user}
