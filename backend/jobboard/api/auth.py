from fastapi import APIRouter, Depends

from ..schemas.auth import CredentialsRequest, LoginResponse, MessageResponse
from ..services.credential_store import CredentialStore
from ..utils.dependencies import get_credential_store

router = APIRouter(tags=["Auth"])


# Plain `def` handlers: FastAPI runs them in its threadpool, so bcrypt work
# doesn't stall the event loop while other requests are accepted.
@router.post("/register", status_code=201, response_model=MessageResponse)
def register(payload: CredentialsRequest, store: CredentialStore = Depends(get_credential_store)):
    store.register(payload.username, payload.password)
    return {"message": "User registered successfully!"}


@router.post("/login", response_model=LoginResponse)
def login(payload: CredentialsRequest, store: CredentialStore = Depends(get_credential_store)):
    user = store.authenticate(payload.username, payload.password)
    return {"message": "Login successful!", "user": user}
