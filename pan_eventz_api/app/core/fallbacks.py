"""
Static content served when a live read fails.

Two kinds of data live here:

* ``DEFAULT_CONTENT`` maps each file-backed collection to the rows a
  fresh installation starts with.  ``seed_content.py`` writes them into
  an empty data directory.
* The ``*_FALLBACK`` payloads are what public read routes return when
  the store raises, or holds nothing, so the site never renders empty
  sections.

Payloads are module constants; routes must hand out copies (see
:func:`fallback`) so a handler mutating its response cannot alter the
next one.
"""

import copy
from typing import Any


_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&h={}&q=80"


def _image(photo: str, width: int, height: int) -> str:
    return _UNSPLASH.format(photo, width, height)


BLOG_POSTS = [
    {
        "id": 1,
        "title": "Planning the Perfect Corporate Event",
        "slug": "planning-perfect-corporate-event",
        "excerpt": "Essential strategies for organizing successful corporate events that leave a lasting impression on attendees and drive business objectives.",
        "content": (
            "Corporate events are crucial for business growth and relationship building. From product "
            "launches to annual conferences, every detail matters. Our comprehensive approach ensures "
            "seamless execution from initial planning to post-event analysis."
        ),
        "author": "Imran Mirza",
        "authorTitle": "Founder & CEO",
        "authorImage": _image("1560250097-0b93528c311a", 100, 100),
        "publishDate": "2023-11-28",
        "category": "Corporate Events",
        "image": _image("1591115765373-5207764f72e4", 800, 500),
        "tags": ["corporate", "conference", "planning", "business"],
        "status": "published",
    },
    {
        "id": 2,
        "title": "The Evolution of Event Technology",
        "slug": "event-technology-evolution",
        "excerpt": "An in-depth look at how technology has transformed the event industry and what innovations to expect in the coming years.",
        "content": (
            "Technology has revolutionized event management, from virtual reality experiences to "
            "AI-powered networking platforms. We leverage live streaming, interactive apps, digital "
            "registration systems and real-time analytics to enhance attendee engagement."
        ),
        "author": "Imran Mirza",
        "authorTitle": "Founder & CEO",
        "authorImage": _image("1560250097-0b93528c311a", 100, 100),
        "publishDate": "2023-10-10",
        "category": "Technology",
        "image": _image("1492684223066-81342ee5ff30", 800, 500),
        "tags": ["technology", "innovation", "events", "digital"],
        "status": "published",
    },
    {
        "id": 3,
        "title": "Creating Memorable Wedding Experiences",
        "slug": "memorable-wedding-experiences",
        "excerpt": "Transform your special day into an unforgettable celebration with our expert wedding planning services and attention to detail.",
        "content": (
            "Every wedding tells a unique love story, and we specialize in bringing those stories to "
            "life through personalized planning and flawless execution. From intimate ceremonies to "
            "grand celebrations, we handle venue selection, catering, décor and guest logistics."
        ),
        "author": "Priya Sharma",
        "authorTitle": "Wedding Specialist",
        "authorImage": _image("1580489944761-15a19d654956", 100, 100),
        "publishDate": "2023-09-22",
        "category": "Weddings",
        "image": _image("1519741497674-611481863552", 800, 500),
        "tags": ["wedding", "celebration", "planning", "romance"],
        "status": "published",
    },
]

GALLERY_ITEMS = [
    {
        "id": 1,
        "title": "Corporate Annual Conference 2023",
        "category": "corporate",
        "description": "A prestigious annual conference for leading technology companies featuring keynote speakers, networking sessions, and product launches.",
        "event": "TechCon Mumbai 2023",
        "date": "2023-03-15",
        "imageUrl": _image("1540575467063-178a50c2df87", 1000, 667),
        "mediaType": "image",
        "tags": ["corporate", "conference", "technology", "networking"],
        "isEventSpecific": True,
    },
    {
        "id": 2,
        "title": "Luxury Wedding at Grand Hyatt",
        "category": "wedding",
        "description": "An elegant wedding celebration combining traditional and modern elements with breathtaking décor and world-class hospitality.",
        "event": "Kumar-Sharma Wedding",
        "date": "2023-02-20",
        "imageUrl": _image("1519741497674-611481863552", 1000, 667),
        "mediaType": "image",
        "tags": ["wedding", "luxury", "traditional", "celebration"],
        "isEventSpecific": True,
    },
    {
        "id": 3,
        "title": "University Sports Championship",
        "category": "sports",
        "description": "Inter-college sports championship featuring multiple sporting events, athlete ceremonies, and award presentations.",
        "event": "University Games 2023",
        "date": "2023-01-10",
        "imageUrl": _image("1571019613454-1cb2f99b2d8b", 1000, 667),
        "mediaType": "image",
        "tags": ["sports", "championship", "university", "athletics"],
        "isEventSpecific": True,
    },
    {
        "id": 4,
        "title": "Cultural Festival Celebration",
        "category": "cultural",
        "description": "A vibrant cultural festival showcasing diverse traditions, performances, and culinary experiences from various communities.",
        "event": "Heritage Cultural Festival",
        "date": "2023-04-05",
        "imageUrl": _image("1501281668745-f7f57925c3b4", 1000, 667),
        "mediaType": "image",
        "tags": ["cultural", "festival", "tradition", "community"],
        "isEventSpecific": True,
    },
    {
        "id": 5,
        "title": "Product Launch Gala",
        "category": "corporate",
        "description": "An exclusive product launch event featuring live demonstrations, celebrity endorsements, and media presentations.",
        "event": "Innovation Launch 2023",
        "date": "2023-05-12",
        "imageUrl": _image("1492684223066-81342ee5ff30", 1000, 667),
        "mediaType": "image",
        "tags": ["product", "launch", "corporate", "innovation"],
        "isEventSpecific": True,
    },
    {
        "id": 6,
        "title": "Charity Fundraising Dinner",
        "category": "social",
        "description": "An elegant charity dinner raising funds for education initiatives, featuring guest speakers and live entertainment.",
        "event": "Education for All Charity Gala",
        "date": "2023-06-18",
        "imageUrl": _image("1511578314322-379afb476865", 1000, 667),
        "mediaType": "image",
        "tags": ["charity", "fundraising", "social", "education"],
        "isEventSpecific": True,
    },
]

TEAM_MEMBERS = [
    {
        "id": 1,
        "name": "Imran Mirza",
        "position": "Founder & CEO",
        "bio": "With over 15 years of experience in event management, Imran leads Pan Eventz with vision and strategic direction.",
        "image": _image("1560250097-0b93528c311a", 400, 400),
        "email": "imran@paneventz.com",
        "phone": "+91 9323641780",
        "specialties": ["Corporate Events", "Strategic Planning", "Client Relations"],
        "experience": "15+ years",
        "order": 1,
    },
    {
        "id": 2,
        "name": "Priya Sharma",
        "position": "Creative Director",
        "bio": "Priya brings artistic vision and creative excellence to every project.",
        "image": _image("1580489944761-15a19d654956", 400, 400),
        "email": "priya@paneventz.com",
        "phone": "+91 9876543210",
        "specialties": ["Event Design", "Décor Coordination", "Creative Conceptualization"],
        "experience": "10+ years",
        "order": 2,
    },
    {
        "id": 3,
        "name": "Rajesh Kumar",
        "position": "Operations Manager",
        "bio": "Rajesh ensures flawless execution of all events through meticulous planning and coordination.",
        "image": _image("1472099645785-5658abf4ff4e", 400, 400),
        "email": "rajesh@paneventz.com",
        "phone": "+91 9988776655",
        "specialties": ["Logistics Management", "Vendor Coordination", "Project Execution"],
        "experience": "12+ years",
        "order": 3,
    },
    {
        "id": 4,
        "name": "Ananya Patel",
        "position": "Client Relations Manager",
        "bio": "Ananya specializes in building strong client relationships and ensuring complete satisfaction throughout the event journey.",
        "image": _image("1494790108755-2616b612b27c", 400, 400),
        "email": "ananya@paneventz.com",
        "phone": "+91 9123456789",
        "specialties": ["Client Communication", "Relationship Management", "Customer Service"],
        "experience": "8+ years",
        "order": 4,
    },
]

TESTIMONIALS = [
    {
        "id": 1,
        "name": "Vikram Malhotra",
        "position": "CEO, TechnoCore Solutions",
        "company": "TechnoCore Solutions",
        "rating": 5,
        "content": "Pan Eventz delivered an exceptional corporate conference that exceeded our expectations. Their attention to detail and professional coordination made our annual event a tremendous success.",
        "image": _image("1507003211169-0a1dd7228f2d", 150, 150),
        "eventType": "Corporate Conference",
        "eventDate": "2023-03-15",
        "featured": True,
        "active": True,
    },
    {
        "id": 2,
        "name": "Kavita & Arjun Sharma",
        "position": "Wedding Couple",
        "company": "Personal",
        "rating": 5,
        "content": "Our wedding was absolutely perfect thanks to Pan Eventz. From the initial planning to the final moments of our celebration, every detail was flawlessly executed.",
        "image": _image("1469474968028-56623f02e42e", 150, 150),
        "eventType": "Wedding",
        "eventDate": "2023-02-20",
        "featured": True,
        "active": True,
    },
    {
        "id": 3,
        "name": "Dr. Rajesh Gupta",
        "position": "Principal, Mumbai University",
        "company": "Mumbai University",
        "rating": 5,
        "content": "The university sports championship organized by Pan Eventz was outstanding. Their team managed complex logistics seamlessly and created an engaging atmosphere for all participants.",
        "image": _image("1472099645785-5658abf4ff4e", 150, 150),
        "eventType": "Sports Event",
        "eventDate": "2023-01-10",
        "featured": False,
        "active": True,
    },
    {
        "id": 4,
        "name": "Meera Patel",
        "position": "Cultural Society President",
        "company": "Heritage Cultural Society",
        "rating": 5,
        "content": "Pan Eventz brought our cultural festival vision to life with incredible creativity and respect for traditions.",
        "image": _image("1494790108755-2616b612b27c", 150, 150),
        "eventType": "Cultural Festival",
        "eventDate": "2023-04-05",
        "featured": False,
        "active": True,
    },
]

EVENTS = [
    {
        "id": 1,
        "title": "Annual Tech Summit 2024",
        "slug": "annual-tech-summit-2024",
        "description": "Join industry leaders for the most anticipated technology conference of the year featuring cutting-edge innovations, networking opportunities, and expert insights.",
        "eventType": "Corporate",
        "category": "Technology",
        "eventDate": "2024-07-15",
        "endDate": "2024-07-17",
        "location": "Grand Convention Center, Mumbai",
        "capacity": 2000,
        "status": "Upcoming",
        "featured": True,
        "coverImage": _image("1540575467063-178a50c2df87", 800, 500),
        "images": [_image("1492684223066-81342ee5ff30", 600, 400), _image("1531058020387-3be344556be6", 600, 400)],
        "tags": ["technology", "innovation", "networking", "corporate"],
    },
    {
        "id": 2,
        "title": "Luxury Wedding Celebration",
        "slug": "luxury-wedding-celebration",
        "description": "An exquisite wedding celebration combining traditional ceremonies with modern elegance, creating unforgettable memories for the couple and their families.",
        "eventType": "Wedding",
        "category": "Personal",
        "eventDate": "2024-06-20",
        "endDate": "2024-06-22",
        "location": "The Grand Palace Resort, Lonavala",
        "capacity": 500,
        "status": "Upcoming",
        "featured": True,
        "coverImage": _image("1519741497674-611481863552", 800, 500),
        "images": [_image("1511578314322-379afb476865", 600, 400)],
        "tags": ["wedding", "luxury", "traditional", "celebration"],
    },
    {
        "id": 3,
        "title": "Cultural Heritage Festival",
        "slug": "cultural-heritage-festival",
        "description": "A vibrant celebration of diverse cultural traditions featuring traditional performances, culinary experiences, and artistic exhibitions from various communities.",
        "eventType": "Cultural",
        "category": "Community",
        "eventDate": "2024-08-10",
        "endDate": "2024-08-12",
        "location": "Cultural Center Mumbai",
        "capacity": 1000,
        "status": "Upcoming",
        "featured": False,
        "coverImage": _image("1501281668745-f7f57925c3b4", 800, 500),
        "images": [_image("1469474968028-56623f02e42e", 600, 400)],
        "tags": ["cultural", "heritage", "festival", "community"],
    },
]

DEFAULT_CONTENT = {
    "blogPosts": BLOG_POSTS,
    "galleryItems": GALLERY_ITEMS,
    "teamMembers": TEAM_MEMBERS,
    "testimonials": TESTIMONIALS,
    "events": EVENTS,
}

GALLERY_FALLBACK = GALLERY_ITEMS[:4]
TESTIMONIALS_FALLBACK = TESTIMONIALS[:3]
TEAM_FALLBACK = TEAM_MEMBERS
EVENTS_FALLBACK = EVENTS
BLOG_FALLBACK = BLOG_POSTS

STATS_FALLBACK = [
    {"id": 1, "label": "Events Completed", "value": 500, "suffix": "+", "order": 1},
    {"id": 2, "label": "Happy Clients", "value": 250, "suffix": "+", "order": 2},
    {"id": 3, "label": "Team Members", "value": 45, "suffix": "+", "order": 3},
    {"id": 4, "label": "Success Rate", "value": 99, "suffix": "%", "order": 4},
]

SERVICES_FALLBACK = [
    {
        "id": 1,
        "title": "Corporate Event Management",
        "slug": "corporate",
        "description": "Professional corporate event planning and execution services for conferences, product launches, and business celebrations.",
        "features": [
            {"text": "Conference and seminar planning"},
            {"text": "Product launch events"},
            {"text": "Corporate celebrations and awards"},
            {"text": "Team building activities"},
        ],
        "processSteps": [
            {"title": "Consultation", "description": "Understanding your business objectives and event requirements", "order": 1},
            {"title": "Strategic Planning", "description": "Developing a comprehensive event strategy and timeline", "order": 2},
            {"title": "Execution", "description": "Flawless implementation with real-time management", "order": 3},
            {"title": "Follow-up", "description": "Post-event analysis and feedback collection", "order": 4},
        ],
    },
    {
        "id": 2,
        "title": "Wedding Planning",
        "slug": "wedding",
        "description": "Complete wedding planning services to make your special day perfect and memorable.",
        "features": [
            {"text": "Venue selection and decoration"},
            {"text": "Catering and menu planning"},
            {"text": "Photography and videography"},
            {"text": "Entertainment coordination"},
        ],
        "processSteps": [
            {"title": "Initial Consultation", "description": "Discussing your vision and requirements", "order": 1},
            {"title": "Planning & Design", "description": "Creating detailed plans and design concepts", "order": 2},
            {"title": "Vendor Coordination", "description": "Managing all vendors and suppliers", "order": 3},
            {"title": "Event Execution", "description": "Ensuring flawless execution on your special day", "order": 4},
        ],
    },
]

ABOUT_FALLBACK = {
    "mission": "To create unforgettable events that exceed expectations and create lasting memories.",
    "vision": "To be the leading event management company in India, known for innovation and excellence.",
    "quality": "We are committed to delivering exceptional quality in every aspect of our service.",
}

DASHBOARD_FALLBACK = {
    "stats": {
        "totalEvents": 125,
        "upcomingEvents": 18,
        "totalInquiries": 87,
        "newInquiries": 12,
    },
    "recentEvents": [
        {"id": 1, "title": "Sharma-Kapoor Wedding", "date": "2023-12-20", "type": "Wedding", "status": "Upcoming"},
        {"id": 2, "title": "TechCorp Annual Conference", "date": "2023-12-15", "type": "Corporate", "status": "Upcoming"},
        {"id": 3, "title": "City Marathon 2023", "date": "2023-12-10", "type": "Sports", "status": "Upcoming"},
        {"id": 4, "title": "Cultural Festival - Delhi", "date": "2023-12-05", "type": "Cultural", "status": "Completed"},
        {"id": 5, "title": "Delhi Public School Annual Day", "date": "2023-11-28", "type": "Education", "status": "Completed"},
    ],
    "recentInquiries": [
        {"id": 1, "name": "Vikram Singh", "email": "vikram@example.com", "eventType": "Corporate", "date": "2023-12-05", "status": "New"},
        {"id": 2, "name": "Neha Gupta", "email": "neha@example.com", "eventType": "Wedding", "date": "2023-12-04", "status": "New"},
        {"id": 3, "name": "Rajesh Kumar", "email": "rajesh@example.com", "eventType": "Sports", "date": "2023-12-02", "status": "In Review"},
        {"id": 4, "name": "Priya Sharma", "email": "priya@example.com", "eventType": "Cultural", "date": "2023-11-30", "status": "Responded"},
        {"id": 5, "name": "Amit Patel", "email": "amit@example.com", "eventType": "Corporate", "date": "2023-11-28", "status": "Closed"},
    ],
}

SETTINGS_DEFAULTS = {
    "general": {
        "siteName": "Pan Eventz",
        "tagline": "Creating Memorable Experiences",
        "description": "Professional event management services in Mumbai",
        "email": "pan.eventz7@gmail.com",
        "phone": "+91 98213 37523",
        "address": "Mumbai, Maharashtra, India",
        "socialMedia": {"facebook": "", "instagram": "", "twitter": "", "linkedin": ""},
    },
    "business": {
        "currency": "INR",
        "timezone": "Asia/Kolkata",
        "businessHours": {
            "start": "09:00",
            "end": "18:00",
            "days": ["monday", "tuesday", "wednesday", "thursday", "friday"],
        },
        "bookingSettings": {
            "advanceBookingDays": 30,
            "cancellationPolicy": "48 hours before event",
            "depositPercentage": 25,
        },
    },
    "notifications": {
        "emailNotifications": True,
        "smsNotifications": False,
        "inquiryAlerts": True,
        "bookingConfirmations": True,
        "reminderEmails": True,
        "marketingEmails": False,
    },
}


def fallback(payload: Any) -> Any:
    """Return a deep copy of a fallback payload."""
    return copy.deepcopy(payload)
