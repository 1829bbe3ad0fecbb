# 📄 File: my_garden/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The HTTP front of the garden app: versioned routes and request middleware.
