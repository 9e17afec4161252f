# Cloud Functions for Firebase SDK
# Every HTTP function deployed from this codebase is imported here.

# -------------------------
# HTTP Function: share_redirect
# -------------------------
from shareRedirect import share_redirect  # noqa: F401
