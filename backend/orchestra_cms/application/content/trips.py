from orchestra_cms.domain.identity import persisted_id
from orchestra_cms.models.trips import TripsContent, TripsFeatureItem, TripsGalleryImage
from orchestra_cms.normalizers.trips import normalize_feature_item, normalize_gallery_image, normalize_trips
from orchestra_cms.schemas.trips import TripsDocument
from .base import ContentType
from .images import ImageTarget
from .sync import ordered_children, replace_children

BUCKET = "trip-images"
GALLERY_IMAGES = ImageTarget("gallery_images/", "gallery_")

# Bundled with the site, never stored in the bucket
DEFAULT_PHOTOS = "/CypressRanchOrchestraInstagramPhotos"


def default_document():
    return {
        "page_title": "Orchestra Trips & Socials",
        "page_subtitle": "Explore our adventures and memorable moments",
        "quote": (
            "Thank you to everyone who makes these moments unforgettable. We're excited for the "
            "upcoming socials and journeys this year. Stay tuned for announcements on our next adventure!"
        ),
        "gallery_images": [
            {"id": "img1", "src": f"{DEFAULT_PHOTOS}/CocoSocial.jpg", "order_number": 1},
            {"id": "img2", "src": f"{DEFAULT_PHOTOS}/HoustonSymphonyMargianos.jpg", "order_number": 2},
            {"id": "img3", "src": f"{DEFAULT_PHOTOS}/HoustonSymphony.jpg", "order_number": 3},
            {"id": "img4", "src": f"{DEFAULT_PHOTOS}/HoustonSymphonyTripArcade.jpg", "order_number": 4},
            {"id": "img5", "src": f"{DEFAULT_PHOTOS}/Disney2023.jpg", "order_number": 5},
        ],
        "feature_items": [
            {
                "id": "feature1",
                "icon": "MusicNote",
                "title": "More Than Just Music",
                "description": (
                    "Being part of our orchestra is about creating beautiful music and forming lasting "
                    "friendships. We believe that the bonds formed off-stage are just as important as the "
                    "harmony we create on-stage."
                ),
                "order_number": 1,
            },
            {
                "id": "feature2",
                "icon": "MapPin",
                "title": "Exciting Adventures",
                "description": (
                    "From weekend retreats to city trips, each event is a chance to unwind, explore, and "
                    "connect in new ways. We've explored museums, attended professional concerts, and even "
                    "had fun at theme parks!"
                ),
                "order_number": 2,
            },
            {
                "id": "feature3",
                "icon": "Users",
                "title": "Unforgettable Moments",
                "description": (
                    "These experiences bring us together, whether it's sightseeing, enjoying group dinners, "
                    "or simply having fun. The memories we create during these trips last a lifetime and "
                    "strengthen our musical connection."
                ),
                "order_number": 3,
            },
        ],
    }


def _gallery(content):
    return ordered_children(TripsGalleryImage, parent_column="content_id", parent_id=content.id)


def _features(content):
    return ordered_children(TripsFeatureItem, parent_column="content_id", parent_id=content.id)


def assemble(content):
    return normalize_trips(content, _gallery(content), _features(content))


def resolve_images(document, content, tracker):
    previous = {}
    if content is not None:
        for row in _gallery(content):
            previous[row.id] = row.src
            tracker.remember(row.src)

    for image in document.gallery_images:
        image.src = tracker.resolve(
            image.src,
            target=GALLERY_IMAGES,
            fallback=previous.get(persisted_id(image.id)),
        )


def apply_fields(content, document):
    content.page_title = document.page_title
    content.page_subtitle = document.page_subtitle
    content.quote = document.quote


def write_children(content, document):
    gallery = replace_children(
        TripsGalleryImage,
        parent_column="content_id",
        parent_id=content.id,
        items=document.gallery_images,
        to_row=lambda image: {"src": image.src},
        order_base=1,
        image_fields=("src",),
    )
    features = replace_children(
        TripsFeatureItem,
        parent_column="content_id",
        parent_id=content.id,
        items=document.feature_items,
        to_row=lambda item: {"icon": item.icon, "title": item.title, "description": item.description},
        order_base=1,
    )
    return {
        "gallery_images": [normalize_gallery_image(row) for row in gallery],
        "feature_items": [normalize_feature_item(row) for row in features],
    }


TRIPS = ContentType(
    name="trips",
    label="Trips",
    model=TripsContent,
    schema=TripsDocument,
    default_document=default_document,
    assemble=assemble,
    apply_fields=apply_fields,
    write_children=write_children,
    resolve_images=resolve_images,
    bucket=BUCKET,
    image_targets=(GALLERY_IMAGES,),
)
