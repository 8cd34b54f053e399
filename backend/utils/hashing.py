# utils/hashing.py
from passlib.context import CryptContext

# pbkdf2 keeps hashing pure-python (no bcrypt wheel needed)
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
