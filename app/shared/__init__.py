# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools used by both the share pages
# and the LINE sign-in bridge.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel: configuration, exceptions, logging, and small helpers.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules
