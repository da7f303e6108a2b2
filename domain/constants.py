"""
This module contains centralized constants used throughout the client,
ensuring a single source of truth for view names, stylesheet mapping,
redirect delays and user-facing messages.
"""

# Every view the router knows about. Anything else resolves to "home".
VIEW_NAMES = (
    "home",
    "login",
    "register",
    "password-recovery",
    "dashboard",
    "profile",
    "all",
    "reset-password",
    "board",
)

DEFAULT_VIEW = "home"
NAV_PREFIX = "#/"

# The recovery view handles both requesting and completing a reset
ROUTE_ALIASES = {
    "reset-password": "password-recovery",
}

# View name -> stylesheet name (several views share one sheet)
VIEW_STYLE_MAP = {
    "login": "auth",
    "register": "auth",
    "password-recovery": "auth",
    "home": "home",
    "board": "board",
    "profile": "profile",
    "dashboard": "dashboard",
    "all": "dashboard",
}

VIEW_CSS_ID = "view-css"
TOKEN_STORAGE_KEY = "token"

# Seconds between a successful submit and the follow-up navigation
REGISTER_REDIRECT_DELAY = 1.0
LOGIN_REDIRECT_DELAY = 0.4
RESET_REDIRECT_DELAY = 1.5

# Sidebar navigation (label, hash)
NAV_LINKS = [
    ("🏠 Home", "#/home"),
    ("🔑 Login", "#/login"),
    ("📝 Register", "#/register"),
    ("🗂️ Dashboard", "#/dashboard"),
    ("✅ Board", "#/board"),
    ("🙍 Profile", "#/profile"),
    ("🔁 Password recovery", "#/password-recovery"),
]

VIEW_LOAD_ERROR = "Error loading the view."

SUCCESS_COLOR = "green"
ERROR_COLOR = "red"

REGISTER_SUCCESS = "Successfully registered! 🎉"
REGISTER_FAILED = "Registration failed."
LOGIN_SUCCESS = "You have successfully logged in! 🎉"
LOGIN_FAILED_PREFIX = "Could not log in: "
PASSWORDS_DO_NOT_MATCH = "Passwords do not match."

RECOVERY_EMAIL_REQUIRED = "Please enter your email."
RECOVERY_EMAIL_SENT = "✅ Recovery email sent. Check your inbox."
RESET_SUCCESS = "Password successfully reset. You can now log in."
RESET_WEAK_PASSWORD = (
    "Password must be at least 8 characters and include uppercase, "
    "lowercase, number, and special character."
)
GENERIC_FAILURE = "Something went wrong."

PROFILE_LOAD_FAILED = "Error loading profile"
PROFILE_PLACEHOLDER = "-"

LIST_CREATE_FAILED_PREFIX = "Error: "
