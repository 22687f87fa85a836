# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the Petskub share and sign-in service
# and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the Petskub FastAPI service.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.main (application entry point)

"""
Petskub Share API - social share pages and LINE sign-in bridge for the Petskub community app.
"""

__version__ = "1.0.0"
__title__ = "Petskub Share API"
