# 📄 File: my_garden/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the garden app where to keep its data
# and how the calendar and reminders behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the settings model and its cached factory.

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
