from .user import CustomUser, CustomUserManager

__all__ = ["CustomUser", "CustomUserManager"]
