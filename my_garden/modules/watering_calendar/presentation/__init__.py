# 📄 File: my_garden/modules/watering_calendar/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web doors into the watering calendar.
