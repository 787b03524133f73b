"""
Service layer abstraction.

Each service encapsulates the content logic for one domain and is
constructed around the store it reads and writes: ``FileStorage`` for
the editable collections (gallery, blog, events, testimonials, team,
inquiries, settings) or ``MockDB`` for the structured site content
(services, slides, technologies, about page, statistics, users).
Route handlers build services from the stores injected by FastAPI, so
the handlers never touch a store directly.
"""
