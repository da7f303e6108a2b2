import itertools
import random
import string

_counter = itertools.count(1)


def create_id_with_prefix(prefix: str) -> str:
    """Short unique key for Streamlit widgets and view scopes."""
    # sequence number + 4 random chars
    seq = next(_counter)
    rand = ''.join(random.choices(string.ascii_lowercase + string.digits, k=4))
    return f"{prefix}_{seq}_{rand}"
