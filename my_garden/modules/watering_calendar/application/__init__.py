# 📄 File: my_garden/modules/watering_calendar/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Calendar use cases: show a month, mark a day watered, take the mark off again.
