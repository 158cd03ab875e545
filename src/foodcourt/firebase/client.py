"""Firebase app initialization and database references."""

import firebase_admin
from firebase_admin import credentials, db

from foodcourt.config import FirebaseConfig

_app: firebase_admin.App | None = None


def init_firebase(config: FirebaseConfig) -> firebase_admin.App:
    """Initialize Firebase app with the given config."""
    global _app

    if _app is not None:
        return _app

    if not config.credentials_path.exists():
        raise FileNotFoundError(f"Credentials file not found: {config.credentials_path}")

    cred = credentials.Certificate(str(config.credentials_path))
    _app = firebase_admin.initialize_app(cred, {"databaseURL": config.database_url})

    return _app


def get_reference(config: FirebaseConfig, path: str = "/") -> db.Reference:
    """Get a Realtime Database reference, initializing Firebase if needed."""
    app = init_firebase(config)
    return db.reference(path, app=app)


def reset_client():
    """Reset the Firebase client (useful for testing or switching environments)."""
    global _app
    if _app is not None:
        firebase_admin.delete_app(_app)
        _app = None
