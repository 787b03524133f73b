"""
Sample rows loaded into a fresh ``MockDB``.

The in-memory database holds the structured site content: services
with their features and process steps, homepage slides, featured
technologies, the about page with its team and values, and the
headline statistics.  ``seed_mock_db`` inserts everything through the
regular builders so ids and ``createdAt`` stamps are assigned the same
way as for admin writes.
"""

import logging

from .db import (
    MockDB,
    about,
    about_team,
    about_values,
    service_features,
    service_process_steps,
    services,
    slides,
    stats,
    technologies,
)


logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&h={}&q=80"


def _image(photo: str, width: int, height: int) -> str:
    return _UNSPLASH.format(photo, width, height)


SERVICES = [
    {
        "slug": "corporate",
        "title": "Corporate Events",
        "description": "Professional conferences, product launches, team-building events, and corporate galas designed to elevate your brand.",
        "photo": "1540575467063-178a50c2df87",
        "banner_photo": "1540575467063-178a50c2df87",
        "features": ["Conferences & Seminars", "Award Ceremonies", "Team Building Events"],
    },
    {
        "slug": "wedding",
        "title": "Wedding Events",
        "description": "Magical wedding experiences, from intimate ceremonies to grand celebrations, with meticulous attention to detail.",
        "photo": "1519741497674-611481863552",
        "banner_photo": "1519741497674-611481863552",
        "features": ["Wedding Planning & Coordination", "Elegant Decor & Staging", "Cultural Wedding Ceremonies"],
    },
    {
        "slug": "sports",
        "title": "Sports Events",
        "description": "Dynamic sports event management with professional sound systems, lighting, and live streaming services.",
        "photo": "1461896836934-ffe607ba8211",
        "banner_photo": "1461896836934-ffe607ba8211",
        "features": ["Tournament Organization", "Live Streaming & Broadcasting", "Audio-Visual Production"],
    },
    {
        "slug": "education",
        "title": "School & College Events",
        "description": "Vibrant educational events including annual functions, cultural fests, and inter-school competitions.",
        "photo": "1523580494863-6f3031224c94",
        "banner_photo": "1523580494863-6f3031224c94",
        "features": ["Annual Day Functions", "College Festivals", "Graduation Ceremonies"],
    },
    {
        "slug": "cultural",
        "title": "Cultural Events",
        "description": "Showcase cultural performances, TED Talks, art exhibitions, and community gatherings with professional execution.",
        "photo": "1529070538774-1843cb3265df",
        "banner_photo": "1501281668745-f7f57925c3b4",
        "features": ["TED Talks & Conferences", "Music & Dance Performances", "Art & Cultural Exhibitions"],
    },
    {
        "slug": "logistics",
        "title": "Logistics & Production",
        "description": "Comprehensive event logistics including transportation, resource management, and on-ground coordination.",
        "photo": "1492683513054-55277abccd99",
        "banner_photo": "1492683513054-55277abccd99",
        "features": ["Equipment & Resource Management", "Transportation & Accommodation", "On-site Event Coordination"],
    },
]

PROCESS_STEPS = [
    ("Consultation", "We begin with an in-depth consultation to understand your goals, preferences, and requirements."),
    ("Proposal & Planning", "Based on your input, we create a comprehensive event proposal with detailed planning and timelines."),
    ("Execution", "Our team handles all aspects of setup, management, and coordination on the event day."),
    ("Post-Event Analysis", "We provide a detailed report and analysis to measure the success of your event."),
]

SLIDES = [
    {
        "title": "Creating",
        "titleHighlight": "Memorable",
        "description": "Pan Eventz - Your trusted partner for extraordinary corporate events, weddings, and celebrations.",
        "backgroundImage": _image("1511578314322-379afb476865", 1920, 800),
        "primaryCtaText": "Our Services",
        "primaryCtaLink": "services",
        "secondaryCtaText": "Contact Us",
        "secondaryCtaLink": "contact",
        "order": 1,
        "active": True,
    },
    {
        "title": "Stunning",
        "titleHighlight": "Wedding",
        "description": "We bring your dream wedding to life with impeccable planning and magical execution.",
        "backgroundImage": _image("1492684223066-81342ee5ff30", 1920, 800),
        "primaryCtaText": "Wedding Services",
        "primaryCtaLink": "services/wedding",
        "secondaryCtaText": "View Gallery",
        "secondaryCtaLink": "gallery",
        "order": 2,
        "active": True,
    },
    {
        "title": "Spectacular",
        "titleHighlight": "Cultural",
        "description": "From TED Talks to music festivals, we create immersive cultural experiences that inspire.",
        "backgroundImage": _image("1501281668745-f7f57925c3b4", 1920, 800),
        "primaryCtaText": "Cultural Events",
        "primaryCtaLink": "services/cultural",
        "secondaryCtaText": "Get a Quote",
        "secondaryCtaLink": "contact",
        "order": 3,
        "active": True,
    },
]

TECHNOLOGIES = [
    ("Pro Audio", "High-end sound systems for crystal clear audio.", "fa-volume-up"),
    ("Video Shooting", "Professional video capture and production services.", "fa-video"),
    ("Lighting Systems", "Advanced lighting solutions for perfect ambiance.", "fa-lightbulb"),
    ("LED Walls", "High-resolution LED displays for dynamic visuals.", "fa-tv"),
    ("Laser Shows", "Spectacular laser displays for stunning effects.", "fa-bahai"),
    ("Stage Design", "Custom stage setups to match your event theme.", "fa-drafting-compass"),
]

ABOUT = {
    "description": (
        "Pan Eventz is a premier event management company dedicated to creating extraordinary "
        "experiences through innovation, creativity, and flawless execution. With over a decade of "
        "industry experience, we specialize in conceptualizing, planning, and executing events of all "
        "scales - from intimate gatherings to grand celebrations."
    ),
    "mission": "To create memorable events that exceed client expectations.",
    "vision": "To be the most trusted event management partner nationally.",
    "history": (
        "Founded in 2013, Pan Eventz began as a small team passionate about creating exceptional "
        "events. Over the years, we've grown into a full-service event management company with a "
        "reputation for excellence."
    ),
    "team": "Skilled professionals with diverse expertise.",
    "quality": "We never compromise on quality and service.",
    "images": [
        _image("1511578314322-379afb476865", 600, 400),
        _image("1531058020387-3be344556be6", 600, 400),
        _image("1492684223066-81342ee5ff30", 600, 400),
        _image("1540575467063-178a50c2df87", 600, 400),
    ],
}

ABOUT_TEAM = [
    {
        "name": "Imran Mirza",
        "position": "Founder & CEO",
        "bio": "With over 15 years of experience in event management, Imran leads the company with vision and strategic direction.",
        "image": _image("1560250097-0b93528c311a", 400, 400),
        "order": 1,
    },
    {
        "name": "Priya Sharma",
        "position": "Creative Director",
        "bio": "Priya brings artistic vision and creative expertise to every event.",
        "image": _image("1573496359142-b8d87734a5a2", 400, 400),
        "order": 2,
    },
    {
        "name": "Rajiv Mehta",
        "position": "Technical Director",
        "bio": "Rajiv oversees all technical aspects of events, from sound and lighting to stage design and special effects.",
        "image": _image("1472099645785-5658abf4ff4e", 400, 400),
        "order": 3,
    },
    {
        "name": "Ananya Patel",
        "position": "Client Relations Manager",
        "bio": "Ananya excels at understanding client needs and ensuring their vision is realized.",
        "image": _image("1580489944761-15a19d654956", 400, 400),
        "order": 4,
    },
]

ABOUT_VALUES = [
    ("Excellence", "We strive for excellence in every aspect of our work, consistently delivering high-quality services that exceed expectations."),
    ("Creativity", "We bring fresh, innovative ideas to every project, creating unique and memorable experiences for our clients."),
    ("Integrity", "We operate with honesty, transparency, and ethical conduct in all our business dealings."),
    ("Collaboration", "We believe in the power of teamwork, both within our organization and in our partnerships with clients."),
]

STATS = [
    ("Events Completed", 500),
    ("Happy Clients", 350),
    ("Years Experience", 10),
    ("Team Members", 50),
]


def seed_mock_db(db: MockDB) -> None:
    """Insert the sample content into empty tables of ``db``."""
    if not db.count(services):
        for entry in SERVICES:
            [service] = db.insert(services).values(
                {
                    "slug": entry["slug"],
                    "title": entry["title"],
                    "description": entry["description"],
                    "imageUrl": _image(entry["photo"], 600, 400),
                    "banner": _image(entry["banner_photo"], 1900, 500),
                }
            ).returning()
            db.insert(service_features).values(
                [{"serviceId": service["id"], "text": text} for text in entry["features"]]
            )
            db.insert(service_process_steps).values(
                [
                    {"serviceId": service["id"], "title": title, "description": description, "order": order}
                    for order, (title, description) in enumerate(PROCESS_STEPS, start=1)
                ]
            )
        logger.debug("Seeded %d services", len(SERVICES))

    if not db.count(slides):
        db.insert(slides).values(SLIDES)

    if not db.count(technologies):
        db.insert(technologies).values(
            [
                {"title": title, "description": description, "icon": icon, "order": order, "active": True}
                for order, (title, description, icon) in enumerate(TECHNOLOGIES, start=1)
            ]
        )

    if not db.count(about):
        db.insert(about).values(ABOUT)
        db.insert(about_team).values(ABOUT_TEAM)
        db.insert(about_values).values(
            [
                {"title": title, "description": description, "order": order}
                for order, (title, description) in enumerate(ABOUT_VALUES, start=1)
            ]
        )

    if not db.count(stats):
        db.insert(stats).values(
            [
                {"label": label, "value": value, "suffix": "+", "order": order}
                for order, (label, value) in enumerate(STATS, start=1)
            ]
        )
