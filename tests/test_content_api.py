"""
Orchestra CMS - Content API Tests

Cross-cutting behaviour of the content endpoints:
- Role gate on saves (401 / 403 before any side effect)
- Unknown content types and malformed bodies
- Optimistic concurrency via document version, If-Match and If-Unmodified-Since
- Audit trail and request ids
"""

from datetime import timedelta
from unittest.mock import patch

import pytest
from flask_jwt_extended import create_access_token

from conftest import TINY_PNG, awards_document, concerts_document, homepage_document

from orchestra_cms.application.content.images import ImageTracker
from orchestra_cms.models.audit_log import AuditLog
from orchestra_cms.models.awards import AwardsContent
from orchestra_cms.models.competitions import CompetitionsPage
from orchestra_cms.models.concerts import Concert
from orchestra_cms.models.homepage import HomepageContent

CONTENT_TYPES = ["homepage", "concerts", "competitions", "trips", "awards", "resources"]


def _awards_with_image():
    return awards_document([{"title": "A", "imageSrc": TINY_PNG, "imageAlt": "a"}])


class TestPublicRead:
    @pytest.mark.parametrize("content_type", CONTENT_TYPES)
    def test_every_type_has_a_default_document(self, client, content_type):
        response = client.get(f"/api/v1/content/{content_type}")
        body = response.get_json()

        assert response.status_code == 200
        assert body["content"]["version"] == 0
        assert body["requestId"]
        assert response.headers["ETag"] == '"0"'

    def test_unknown_type_is_404(self, client):
        response = client.get("/api/v1/content/bake-sale")
        assert response.status_code == 404
        assert "error" in response.get_json()

    def test_request_id_is_echoed(self, client):
        response = client.get("/api/v1/content/awards", headers={"X-Request-ID": "abc12345"})
        assert response.headers["X-Request-ID"] == "abc12345"
        assert response.get_json()["requestId"] == "abc12345"


class TestAuthGate:
    def test_missing_token_is_401(self, app, client, storage):
        response = client.put("/api/v1/admin/content/awards", json=_awards_with_image())

        assert response.status_code == 401
        assert storage.uploads == []
        with app.app_context():
            assert AwardsContent.query.count() == 0

    def test_student_is_403(self, app, put_content, storage):
        response = put_content("awards", _awards_with_image(), role="student")

        assert response.status_code == 403
        assert response.get_json()["error"] == "Insufficient permissions"
        assert storage.uploads == []
        with app.app_context():
            assert AwardsContent.query.count() == 0

    def test_disabled_account_is_401(self, put_content):
        response = put_content("awards", _awards_with_image(), role="disabled")
        assert response.status_code == 401

    def test_garbage_token_is_401(self, client):
        response = client.put(
            "/api/v1/admin/content/awards",
            json=_awards_with_image(),
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert response.status_code == 401

    @pytest.mark.parametrize("role", ["admin", "leadership"])
    def test_editor_roles_can_save(self, put_content, role):
        response = put_content("awards", awards_document([]), role=role)
        assert response.status_code == 200

    def test_admin_read_requires_token(self, client, auth_headers):
        assert client.get("/api/v1/admin/content/trips").status_code == 401
        response = client.get("/api/v1/admin/content/trips", headers=auth_headers("leadership"))
        assert response.status_code == 200

    def test_unknown_type_on_admin_route_is_404(self, put_content):
        response = put_content("bake-sale", {})
        assert response.status_code == 404


class TestMalformedBodies:
    def test_invalid_json(self, client, auth_headers):
        headers = auth_headers("admin", {"Content-Type": "application/json"})
        response = client.put("/api/v1/admin/content/awards", data="{not json", headers=headers)

        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid JSON in request body"

    def test_non_object_body(self, put_content):
        response = put_content("awards", ["not", "an", "object"])
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid data format"


class TestOptimisticConcurrency:
    def test_version_increments_per_save(self, put_content, get_content):
        assert put_content("awards", awards_document([])).get_json()["version"] == 1
        assert put_content("awards", awards_document([])).get_json()["version"] == 2
        assert get_content("awards")["version"] == 2

    def test_stale_document_version_is_409(self, put_content, get_content, storage):
        put_content("awards", awards_document([]))
        put_content("awards", awards_document([]))

        response = put_content("awards", awards_document(
            [{"title": "A", "imageSrc": TINY_PNG, "imageAlt": "a"}],
            version=1,
        ))

        assert response.status_code == 409
        assert response.get_json()["details"] == {"expected": 1, "current": 2}
        assert storage.uploads == []
        assert get_content("awards")["achievements"] == []

    def test_current_document_version_is_accepted(self, put_content):
        put_content("awards", awards_document([]))
        response = put_content("awards", awards_document([], version=1))
        assert response.status_code == 200
        assert response.get_json()["version"] == 2

    def test_if_match_header(self, put_content):
        put_content("awards", awards_document([]))

        stale = put_content("awards", awards_document([]), headers={"If-Match": '"0"'})
        assert stale.status_code == 409

        fresh = put_content("awards", awards_document([]), headers={"If-Match": '"1"'})
        assert fresh.status_code == 200

    def test_if_match_wildcard_needs_a_saved_record(self, put_content):
        first = put_content("awards", awards_document([]), headers={"If-Match": "*"})
        assert first.status_code == 409

        put_content("awards", awards_document([]))
        response = put_content("awards", awards_document([]), headers={"If-Match": "*"})
        assert response.status_code == 200
        assert response.get_json()["version"] == 2

    def test_malformed_if_match_is_400(self, put_content):
        response = put_content("awards", awards_document([]), headers={"If-Match": "latest"})
        assert response.status_code == 400

    def test_if_unmodified_since_in_the_past_is_409(self, put_content):
        put_content("awards", awards_document([]))
        response = put_content(
            "awards",
            awards_document([]),
            headers={"If-Unmodified-Since": "Wed, 21 Oct 2015 07:28:00 GMT"},
        )
        assert response.status_code == 409

    def test_if_unmodified_since_in_the_future_is_accepted(self, put_content):
        put_content("awards", awards_document([]))
        response = put_content(
            "awards",
            awards_document([]),
            headers={"If-Unmodified-Since": "Fri, 01 Jan 2100 00:00:00 GMT"},
        )
        assert response.status_code == 200

    def test_first_save_against_version_zero(self, put_content):
        response = put_content("awards", awards_document([], version=0))
        assert response.status_code == 200


class TestAuditTrail:
    def test_save_writes_audit_entry(self, app, put_content, users):
        put_content("awards", _awards_with_image(), role="leadership")

        with app.app_context():
            entry = AuditLog.query.one()
            assert entry.action == "content.update"
            assert entry.entity_type == "awards"
            assert entry.entity_id == "1"
            assert entry.actor_id == users["leadership"]
            assert entry.payload["version"] == 1
            assert entry.payload["collections"] == {"achievements": 1}
            assert entry.payload["uploaded_images"] == 1

    def test_rejected_save_writes_nothing(self, app, put_content):
        put_content("awards", {"achievements": []})
        with app.app_context():
            assert AuditLog.query.count() == 0

    def test_records_last_editor(self, app, put_content, users):
        put_content("awards", awards_document([]), role="leadership")
        with app.app_context():
            assert AwardsContent.query.one().updated_by == users["leadership"]


class TestErrorBodies:
    def test_missing_token_body(self, client):
        response = client.put("/api/v1/admin/content/awards", json=awards_document([]))
        body = response.get_json()

        assert response.status_code == 401
        assert body["error"] == "Unauthorized"
        assert body["message"]
        assert body["requestId"]

    def test_expired_token_is_401(self, app, client, users):
        with app.app_context():
            token = create_access_token(identity=str(users["admin"]), expires_delta=timedelta(seconds=-1))

        response = client.put(
            "/api/v1/admin/content/awards",
            json=awards_document([]),
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.get_json()["message"] == "Token has expired"


def _keep_inline(self, value, *, target, fallback=None):
    return value


class TestInlinePayloadInvariant:
    @pytest.mark.parametrize(
        "content_type, model, document, column",
        [
            ("homepage", HomepageContent, homepage_document(hero_image_url=TINY_PNG), "hero_image_url"),
            ("concerts", Concert, concerts_document(poster_image_url=TINY_PNG), "poster_image_url"),
            (
                "competitions",
                CompetitionsPage,
                {
                    "title": "Competitions",
                    "description": "",
                    "competitions": [{"name": "UIL", "description": "", "image": TINY_PNG, "categories": []}],
                },
                "competitions.image_url",
            ),
        ],
    )
    def test_inline_image_never_reaches_the_store(self, app, put_content, content_type, model, document, column):
        with patch.object(ImageTracker, "resolve", _keep_inline):
            response = put_content(content_type, document)
        body = response.get_json()

        assert response.status_code == 400
        assert body["error"] == "InvariantViolation"
        assert column in body["message"]
        with app.app_context():
            assert model.query.count() == 0
