from passlib.context import CryptContext

# pbkdf2_sha256 : sel aléatoire par hash, comparaison en temps constant côté passlib
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Retourne False si le mot de passe ne correspond pas (ou si le hash est illisible)."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # hash non reconnu par passlib
        return False
