from .content import normalize_record_meta

def normalize_competition(competition, categories, client_id=None):
    data = {
        "id": competition.id,
        "name": competition.name,
        "description": competition.description or "",
        "image": competition.image_url,
        "categories": [category.name for category in categories],
        "additionalInfo": competition.additional_info,
        "display_order": competition.display_order,
    }

    # Lets the editor swap its temporary key for the stored id
    if client_id:
        data["clientId"] = client_id

    return data

def normalize_competitions_page(page, competitions):
    return {
        **normalize_record_meta(page),
        "title": page.title,
        "description": page.description or "",
        "competitions": [
            normalize_competition(competition, categories)
            for competition, categories in competitions
        ],
    }
