# 📄 File: my_garden/modules/plant_management/presentation/api/v1/__init__.py
