# 📄 File: my_garden/modules/plant_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant module's use cases: add plants, add photos, remove plants, look them up.
# 🧪 Purpose (Technical Summary):
# Application layer (commands, queries, DTOs, handlers) coordinating domain and infrastructure.
