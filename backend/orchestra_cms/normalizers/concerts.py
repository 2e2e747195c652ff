from orchestra_cms.models.concerts import NO_CONCERT_TEXT
from .content import normalize_record_meta

def normalize_orchestra(group, songs):
    # Songs travel as plain titles; their order is the list order
    return {
        "id": group.id,
        "name": group.name,
        "order_number": group.order_number,
        "songs": [song.song_title for song in songs],
    }

def normalize_concert(concert, orchestras):
    return {
        **normalize_record_meta(concert),
        "concert_name": concert.concert_name,
        "poster_image_url": concert.poster_image_url or "",
        "no_concert_text": concert.no_concert_text or NO_CONCERT_TEXT,
        "orchestras": [normalize_orchestra(group, songs) for group, songs in orchestras],
    }
