from .content import normalize_record_meta

def normalize_resources(content):
    return {
        **normalize_record_meta(content),
        "calendar_url": content.calendar_url,
        "support_title": content.support_title,
        "youtube_url": content.youtube_url,
    }
