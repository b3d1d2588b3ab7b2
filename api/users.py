"""API routes for accounts and tokens."""

from fastapi import APIRouter, Depends

from api.dependencies import get_account_create, get_login_request, get_user_service
from models.user import AccountCreate, LoginRequest
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=str)
@router.post("/", response_model=str, include_in_schema=False)
def create_account(
    payload: AccountCreate = Depends(get_account_create),
    service: UserService = Depends(get_user_service),
) -> str:
    """Create an account and return its token."""
    return service.create_account(payload.username, payload.password)


# POST keeps the password out of the URL while the path still names the
# account a new token is being created for.
@router.post("/{username}", response_model=str)
def login(
    username: str,
    payload: LoginRequest = Depends(get_login_request),
    service: UserService = Depends(get_user_service),
) -> str:
    """Log in and return a freshly issued token."""
    return service.login(username, payload.password)
