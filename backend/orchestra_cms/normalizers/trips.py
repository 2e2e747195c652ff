from .content import normalize_record_meta

def normalize_gallery_image(image):
    return {
        "id": image.id,
        "src": image.src,
        "order_number": image.order_number,
    }

def normalize_feature_item(item):
    return {
        "id": item.id,
        "icon": item.icon,
        "title": item.title,
        "description": item.description or "",
        "order_number": item.order_number,
    }

def normalize_trips(content, gallery_images, feature_items):
    return {
        **normalize_record_meta(content),
        "page_title": content.page_title,
        "page_subtitle": content.page_subtitle or "",
        "quote": content.quote or "",
        "gallery_images": [normalize_gallery_image(i) for i in gallery_images],
        "feature_items": [normalize_feature_item(i) for i in feature_items],
    }
