# 📄 File: my_garden/modules/plant_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web doors into the plant module.
