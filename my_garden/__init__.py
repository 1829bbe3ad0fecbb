# 📄 File: my_garden/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that the 'my_garden' folder holds the My Garden application code
# and records its version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the My Garden FastAPI application.
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - shared.config.settings (default version)

"""
My Garden - House Plant Watering Companion

Backend for tracking house plants: a plant collection with photos,
watering reminders computed from each plant's watering frequency and
a month calendar where watered days are marked.
"""

__version__ = "1.0.0"
__title__ = "My Garden API"
__description__ = "House plant tracking with watering reminders and calendar"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
