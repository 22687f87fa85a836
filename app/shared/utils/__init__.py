# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Small helpful tools used across the service, like logging setup and value fallbacks.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package (structured logging, helper functions).

# 🔗 Dependencies:
# - logging, helpers

# 🔄 Connected Modules / Calls From:
# Used by: app.main and the knowledge module
