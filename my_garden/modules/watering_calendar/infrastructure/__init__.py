# 📄 File: my_garden/modules/watering_calendar/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where the calendar keeps its watered days between runs.
