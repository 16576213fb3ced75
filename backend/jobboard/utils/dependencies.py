from fastapi import Request

from ..services.credential_store import CredentialStore


def get_credential_store(request: Request) -> CredentialStore:
    """Return the store owned by the running app."""
    return request.app.state.credential_store
