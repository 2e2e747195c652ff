"""
Orchestra CMS - Pytest Configuration & Shared Fixtures

Provides reusable fixtures for:
- A Flask app on an in-memory SQLite database
- An in-memory object store that records uploads and removals
- Seeded admin / leadership / student accounts and their bearer tokens
- Inline image payloads and request helpers for the content API
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest
from flask_jwt_extended import create_access_token

from orchestra_cms import create_app
from orchestra_cms.extensions import db
from orchestra_cms.models.user import User
from orchestra_cms.storage import StorageError

PASSWORD = "Sup3r$ecretPw"

# 1x1 transparent PNG
TINY_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
TINY_PNG = f"data:image/png;base64,{TINY_PNG_B64}"
TINY_JPEG = f"data:image/jpeg;base64,{TINY_PNG_B64}"

PUBLIC_URL = "https://storage.example.test/storage/v1/object/public"


# ---------------------------------------------------------------------------
# Object storage double
# ---------------------------------------------------------------------------


class FakeObjectStorage:
    """Same surface as ObjectStorage, backed by a dict."""

    def __init__(self, public_url: str):
        self.public_url = public_url.rstrip("/")
        self.objects: Dict[Tuple[str, str], Tuple[bytes, str]] = {}
        self.uploads: List[Tuple[str, str]] = []
        self.removals: List[Tuple[str, str]] = []
        self.fail_uploads = False
        self.fail_removals = False

    def exists(self, bucket: str, path: str) -> bool:
        return (bucket, path) in self.objects

    def upload(self, bucket: str, path: str, data: bytes, content_type: str, upsert: bool = True) -> None:
        if self.fail_uploads:
            raise StorageError("upload rejected")
        if not upsert and self.exists(bucket, path):
            raise StorageError("object already exists")
        self.uploads.append((bucket, path))
        self.objects[(bucket, path)] = (data, content_type)

    def remove(self, bucket: str, paths) -> None:
        if self.fail_removals:
            raise StorageError("remove rejected")
        for path in paths:
            self.removals.append((bucket, path))
            self.objects.pop((bucket, path), None)

    def get_public_url(self, bucket: str, path: str) -> str:
        return f"{self.public_url}/{bucket}/{path}"

    def path_of(self, url: str, bucket: str) -> str:
        return url.split(f"/{bucket}/", 1)[1]


# ---------------------------------------------------------------------------
# App fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app():
    app = create_app("testing")
    app.extensions["object_storage"] = FakeObjectStorage(app.config["STORAGE_PUBLIC_URL"])

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app) -> FakeObjectStorage:
    return app.extensions["object_storage"]


def _make_user(email: str, role: str, *, active: bool = True) -> User:
    user = User()
    user.email = email
    user.full_name = email.split("@")[0].title()
    user.role = role
    user.is_active = active
    user.set_password(PASSWORD)
    return user


@pytest.fixture
def users(app) -> Dict[str, int]:
    """Seed one account per role (plus a disabled one) and return their ids."""
    with app.app_context():
        accounts = {
            "admin": _make_user("admin@orchestra.test", "admin"),
            "leadership": _make_user("leader@orchestra.test", "leadership"),
            "student": _make_user("student@orchestra.test", "student"),
            "disabled": _make_user("disabled@orchestra.test", "leadership", active=False),
        }
        db.session.add_all(accounts.values())
        db.session.commit()
        return {role: user.id for role, user in accounts.items()}


@pytest.fixture
def auth_headers(app, users):
    """Build request headers carrying a bearer token for the given role."""

    def _headers(role: str = "admin", extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        with app.app_context():
            token = create_access_token(identity=str(users[role]), additional_claims={"role": role})
        headers = {"Authorization": f"Bearer {token}"}
        headers.update(extra or {})
        return headers

    return _headers


# ---------------------------------------------------------------------------
# Content API helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def put_content(client, auth_headers):
    def _put(content_type: str, document: Any, role: str = "admin", headers: Optional[Dict[str, str]] = None):
        return client.put(
            f"/api/v1/admin/content/{content_type}",
            json=document,
            headers=auth_headers(role, headers),
        )

    return _put


@pytest.fixture
def get_content(client):
    def _get(content_type: str) -> Dict[str, Any]:
        response = client.get(f"/api/v1/content/{content_type}")
        assert response.status_code == 200, response.get_json()
        return response.get_json()["content"]

    return _get


def awards_document(achievements: List[Dict[str, Any]], **overrides) -> Dict[str, Any]:
    document = {
        "title": "Our Achievements",
        "description": "Recent results.",
        "achievements": achievements,
    }
    document.update(overrides)
    return document


def homepage_document(**overrides) -> Dict[str, Any]:
    document = {
        "hero_image_url": "",
        "hero_title": "Cypress Ranch Orchestra",
        "hero_subtitle": "Inspiring musical excellence",
        "about_title": "About",
        "about_description": "About the program.",
        "featured_events_title": "Upcoming Events",
        "stats_students": "250",
        "stats_performances": "20",
        "stats_years": "15",
        "staff_leadership_title": "Staff & Leadership",
        "event_cards": [],
        "staff_members": [],
        "leadership_sections": [],
    }
    document.update(overrides)
    return document


def trips_document(**overrides) -> Dict[str, Any]:
    document = {
        "page_title": "Trips",
        "page_subtitle": "Adventures",
        "quote": "See you on the bus.",
        "gallery_images": [],
        "feature_items": [],
    }
    document.update(overrides)
    return document


def concerts_document(**overrides) -> Dict[str, Any]:
    document = {
        "concert_name": "Winter",
        "poster_image_url": "",
        "no_concert_text": "Nothing scheduled.",
        "orchestras": [],
    }
    document.update(overrides)
    return document
