# Standard library imports
import random
import time

# Upper bound (exclusive) of the random part of a session token
TOKEN_RANDOM_LIMIT = 10 ** 13


def generate_session_token() -> str:
    """
    Create an opaque session token for a successful login
    
    The token is "<epoch milliseconds>-<random integer>". It is a placeholder
    identifier only: it is not signed, not stored and never verified.
    
    Returns:
        Token string
    """
    issued_at_ms = int(time.time() * 1000)
    return f"{issued_at_ms}-{random.randrange(TOKEN_RANDOM_LIMIT)}"
