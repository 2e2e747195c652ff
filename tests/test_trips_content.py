"""
Orchestra CMS - Trips Content Tests

Gallery images and feature items, both 1-based, plus the bundled default
gallery that lives outside the storage bucket.
"""

from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from conftest import PUBLIC_URL, TINY_JPEG, TINY_PNG, trips_document

from orchestra_cms.application.content import trips as trips_content
from orchestra_cms.models.trips import TripsContent, TripsFeatureItem, TripsGalleryImage

BUCKET = "trip-images"


def _feature(title, icon="MusicNote", **extra):
    item = {"icon": icon, "title": title, "description": f"{title} description"}
    item.update(extra)
    return item


class TestTripsDefaults:
    def test_default_gallery_and_features(self, get_content):
        content = get_content("trips")

        assert content["page_title"] == "Orchestra Trips & Socials"
        assert len(content["gallery_images"]) == 5
        assert content["gallery_images"][0]["src"] == "/CypressRanchOrchestraInstagramPhotos/CocoSocial.jpg"
        assert [f["icon"] for f in content["feature_items"]] == ["MusicNote", "MapPin", "Users"]

    def test_saving_the_default_document_keeps_bundled_photos(self, put_content, get_content, storage):
        document = get_content("trips")
        response = put_content("trips", document)
        assert response.status_code == 200, response.get_json()

        saved = get_content("trips")
        assert [g["src"] for g in saved["gallery_images"]] == [g["src"] for g in document["gallery_images"]]
        assert all(isinstance(g["id"], int) for g in saved["gallery_images"])
        assert storage.uploads == []

        # Bundled photos are not bucket objects and must survive removal from the gallery
        put_content("trips", trips_document())
        assert storage.removals == []


class TestTripsSave:
    def test_gallery_order_is_one_based(self, put_content, get_content):
        put_content("trips", trips_document(gallery_images=[
            {"id": "new-1", "src": TINY_PNG},
            {"id": "new-2", "src": TINY_JPEG},
            {"id": "new-3", "src": "https://cdn.test/three.jpg"},
        ]))

        gallery = get_content("trips")["gallery_images"]
        assert [g["order_number"] for g in gallery] == [1, 2, 3]
        assert gallery[0]["src"].startswith(f"{PUBLIC_URL}/{BUCKET}/gallery_images/gallery_")
        assert gallery[0]["src"].endswith(".png")
        assert gallery[1]["src"].endswith(".jpeg")
        assert gallery[2]["src"] == "https://cdn.test/three.jpg"

    def test_empty_gallery_removes_previous_images(self, put_content, get_content, storage):
        put_content("trips", trips_document(gallery_images=[{"src": TINY_PNG}, {"src": TINY_PNG}]))
        previous = [g["src"] for g in get_content("trips")["gallery_images"]]
        assert len(previous) == 2

        response = put_content("trips", trips_document(gallery_images=[]))

        assert response.status_code == 200
        assert get_content("trips")["gallery_images"] == []
        assert sorted(storage.removals) == sorted((BUCKET, storage.path_of(url, BUCKET)) for url in previous)
        assert response.get_json()["image_cleanup"]["deleted"] == 2

    def test_feature_items_replaced_in_order(self, put_content, get_content):
        put_content("trips", trips_document(feature_items=[_feature("A"), _feature("B", icon="Users")]))
        put_content("trips", trips_document(feature_items=[_feature("C", icon="MapPin")]))

        features = get_content("trips")["feature_items"]
        assert [(f["title"], f["icon"], f["order_number"]) for f in features] == [("C", "MapPin", 1)]

    def test_unknown_icon_is_rejected(self, put_content, storage):
        response = put_content("trips", trips_document(
            gallery_images=[{"src": TINY_PNG}],
            feature_items=[_feature("A", icon="Guitar")],
        ))
        assert response.status_code == 400
        assert storage.uploads == []


class TestTripsAtomicity:
    def test_failure_in_a_later_collection_rolls_back_everything(self, app, put_content, get_content, storage):
        put_content("trips", trips_document(
            gallery_images=[{"src": "https://cdn.test/kept.jpg"}],
            feature_items=[_feature("kept")],
        ))
        before = get_content("trips")

        real_replace = trips_content.replace_children

        def failing_replace(model, **kwargs):
            if model is TripsFeatureItem:
                raise SQLAlchemyError("insert failed")
            return real_replace(model, **kwargs)

        with patch.object(trips_content, "replace_children", side_effect=failing_replace):
            response = put_content("trips", trips_document(
                page_title="Changed",
                gallery_images=[{"src": TINY_PNG}],
                feature_items=[_feature("lost")],
            ))

        assert response.status_code == 500
        assert response.get_json()["error"] == "Failed to update trips content"

        after = get_content("trips")
        assert after["page_title"] == before["page_title"]
        assert after["version"] == before["version"]
        assert [g["src"] for g in after["gallery_images"]] == ["https://cdn.test/kept.jpg"]
        assert [f["title"] for f in after["feature_items"]] == ["kept"]

        # The image uploaded for the failed save is discarded
        assert len(storage.uploads) == 1
        assert storage.removals == storage.uploads

        with app.app_context():
            assert TripsContent.query.count() == 1
            assert TripsGalleryImage.query.count() == 1
