# 📄 File: my_garden/modules/plant_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant module's connections to the outside: storage and the notification service.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer implementing the PlantRepository and ReminderNotifier ports.
