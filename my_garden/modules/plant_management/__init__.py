# 📄 File: my_garden/modules/plant_management/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Everything about the user's plants: the plant list, their photos and watering reminders.
#
# 🧪 Purpose (Technical Summary):
# Plant management bounded context laid out in domain / application / infrastructure /
# presentation layers.
