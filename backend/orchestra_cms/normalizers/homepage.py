from .content import normalize_record_meta

def normalize_event_card(card):
    return {
        "id": card.id,
        "title": card.title,
        "description": card.description or "",
        "link_text": card.link_text or "",
        "link_url": card.link_url or "",
        "order_number": card.order_number,
    }

def normalize_staff_member(member):
    return {
        "id": member.id,
        "name": member.name,
        "position": member.position or "",
        "image_url": member.image_url or "",
        "bio": member.bio or "",
        "order_number": member.order_number,
    }

def normalize_leadership_member(member):
    return {
        "id": member.id,
        "name": member.name,
        "image_url": member.image_url or "",
        "order_number": member.order_number,
    }

def normalize_leadership_section(section, members):
    return {
        "id": section.id,
        "name": section.name,
        "color": section.color,
        "order_number": section.order_number,
        "members": [normalize_leadership_member(m) for m in members],
    }

def normalize_homepage(content, event_cards, staff_members, sections):
    """``sections`` is a list of (section, members) pairs in display order."""
    return {
        **normalize_record_meta(content),
        "hero_image_url": content.hero_image_url,
        "hero_title": content.hero_title,
        "hero_subtitle": content.hero_subtitle or "",
        "about_title": content.about_title or "",
        "about_description": content.about_description or "",
        "featured_events_title": content.featured_events_title or "",
        "stats_students": content.stats_students or "",
        "stats_performances": content.stats_performances or "",
        "stats_years": content.stats_years or "",
        "staff_leadership_title": content.staff_leadership_title or "",
        "event_cards": [normalize_event_card(c) for c in event_cards],
        "staff_members": [normalize_staff_member(m) for m in staff_members],
        "leadership_sections": [
            normalize_leadership_section(section, members)
            for section, members in sections
        ],
    }
