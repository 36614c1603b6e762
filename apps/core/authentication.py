"""
Session authentication that answers anonymous API calls with 401.
"""

from rest_framework.authentication import SessionAuthentication


class ShopSessionAuthentication(SessionAuthentication):
    """
    DRF's SessionAuthentication without a WWW-Authenticate header makes the
    framework downgrade NotAuthenticated to 403; advertising a scheme keeps
    it a 401.
    """

    def authenticate_header(self, request):
        return "Session"
