"""Placeholder password hashing.

This is NOT a cryptographic hash. The stored value is derivable from the
password, which keeps stored records comparable with existing data. A real
key-derivation function (bcrypt, argon2) belongs in the persistence/security
adapter and is out of scope for the domain layer.
"""


def hash_password(plain_password: str) -> str:
    """Return the stored form of a plain password."""
    return f"hashed_{plain_password}_{len(plain_password)}"


def password_matches(plain_password: str | None, password_hash: str) -> bool:
    """Check a plain password against a stored hash."""
    if plain_password is None:
        return False
    return hash_password(plain_password) == password_hash
