"""Array keys and URL slugs for Sanity documents."""

import random
import re
import string

KEY_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
DEFAULT_KEY_LENGTH = 12


def generate_key(length: int = DEFAULT_KEY_LENGTH) -> str:
    """Return a random alphanumeric ``_key`` for an item in a Sanity array.

    Keys only need to be unique within one array, so this is not a
    cryptographic generator.
    """
    return "".join(random.choices(KEY_ALPHABET, k=length))


def create_slug(title: str) -> str:
    """Turn a post title into a URL slug.

    Example: 'Why *Rust* Matters: 2025 Edition' -> 'why-rust-matters-2025-edition'
    """
    slug = title.lower()
    slug = re.sub(r"[^A-Za-z0-9_\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug
