"""
Application package for the Pan Eventz backend.

The code is split by concern: ``core`` holds configuration, logging,
security and the two content stores, ``schemas`` the request models,
``services`` the per-domain logic and ``api`` the routers.  Each
content domain (gallery, blog, events, services, ...) has one service
module and one endpoint module.
"""
