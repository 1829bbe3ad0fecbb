# 📄 File: my_garden/modules/watering_calendar/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The calendar's core: month layout and the days marked as watered.
