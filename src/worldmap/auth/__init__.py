"""Authentication for WorldMap.

Issues opaque bearer tokens for username/password accounts and resolves
them to the owner id that scopes every parcel operation.
"""

from worldmap.auth.provider import AuthProvider, PasswordAuthProvider

__all__ = [
    "AuthProvider",
    "PasswordAuthProvider",
]
