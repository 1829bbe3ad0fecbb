# 📄 File: my_garden/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The heart of the plant module: what a plant is and the rules about watering it.
# 🧪 Purpose (Technical Summary):
# Domain layer (models, repository interfaces, domain services) with no framework dependencies
# beyond pydantic.
