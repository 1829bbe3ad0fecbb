# 📄 File: my_garden/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Common tools every part of the garden app uses: settings, errors,
# logging and the storage/image infrastructure.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, core primitives, utilities
# and infrastructure adapters used by the feature modules.

__all__ = []
