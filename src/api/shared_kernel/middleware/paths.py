"""Well-known application paths referenced by more than one guard."""

UNAUTHORIZED_PATH = "/unauthorized"
BUSINESS_LOGIN_PATH = "/business/login"
BUSINESS_DASHBOARD_PATH = "/business/dashboard"
