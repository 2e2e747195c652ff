from .content import normalize_record_meta

def normalize_achievement(achievement):
    # Stored snake_case columns, camelCase on the wire
    return {
        "id": achievement.id,
        "title": achievement.title,
        "imageSrc": achievement.image_src or "",
        "imageAlt": achievement.image_alt or "",
        "order_number": achievement.order_number,
    }

def normalize_awards(content, achievements):
    return {
        **normalize_record_meta(content),
        "title": content.title,
        "description": content.description or "",
        "achievements": [normalize_achievement(a) for a in achievements],
    }
