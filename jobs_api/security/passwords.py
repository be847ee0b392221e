# jobs-api\jobs_api\security\passwords.py

import bcrypt

# Cost factor for the adaptive hash
BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    """Hashes a password using bcrypt with a fresh salt."""
    # bcrypt only looks at the first 72 bytes and works on bytes, not str
    hashed = bcrypt.hashpw(password.encode('utf-8')[:72], bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode('utf-8') # Store the hash as a string

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifies a plain password against a hashed password."""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8')[:72], hashed_password.encode('utf-8'))
    except ValueError:
        # The stored hash is not in a format bcrypt understands
        return False
