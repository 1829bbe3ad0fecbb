# 📄 File: my_garden/modules/watering_calendar/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The watering calendar: a month view where the user marks the days they watered.
#
# 🧪 Purpose (Technical Summary):
# Calendar bounded context (domain / application / infrastructure / presentation).
# Watered marks are independent of individual plants.
