# 📄 File: my_garden/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plumbing shared by all features: where data is stored and how photos are prepared.
# 🧪 Purpose (Technical Summary):
# Shared infrastructure adapters (key-value storage backends, image processing).
