# 📄 File: my_garden/modules/watering_calendar/presentation/api/v1/__init__.py
