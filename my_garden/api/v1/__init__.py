# 📄 File: my_garden/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the garden API.
# 🧪 Purpose (Technical Summary):
# Route prefixes and OpenAPI tags for the v1 routers.
# 🔄 Connected Modules / Calls From:
# my_garden.api.v1.router, my_garden.main

"""
My Garden API Version 1

Structure:
    v1/
    ├── router.py   # aggregation of module routers
    └── health.py   # liveness and storage checks
"""

__api_version__ = "v1"

ROUTE_PREFIXES = {
    "plants": "/plants",
    "calendar": "/calendar",
}

API_TAGS = {
    "plants": "Plants",
    "calendar": "Watering Calendar",
    "health": "Health Check",
}
