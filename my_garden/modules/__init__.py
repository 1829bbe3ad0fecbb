# 📄 File: my_garden/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# The app's feature areas: plant management and the watering calendar.
