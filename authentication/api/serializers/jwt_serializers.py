from rest_framework_simplejwt.tokens import RefreshToken


class CustomRefreshToken(RefreshToken):
    """Refresh token carrying display claims. Authorization never trusts them; RBAC re-reads the database."""

    @classmethod
    def for_user(cls, user):
        token = super().for_user(user)
        token["name"] = user.name
        token["role"] = user.role
        token["is_admin"] = user.is_admin()
        token["is_blockchain_verified"] = user.is_blockchain_verified
        return token
