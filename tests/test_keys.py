import random

import pytest

from autoblog.portable_text.keys import KEY_ALPHABET, create_slug, generate_key


def test_key_alphabet_is_62_alphanumerics() -> None:
    assert len(KEY_ALPHABET) == 62
    assert KEY_ALPHABET.isalnum()


def test_generate_key_default_and_custom_length() -> None:
    assert len(generate_key()) == 12
    assert len(generate_key(8)) == 8
    assert all(c in KEY_ALPHABET for c in generate_key(200))


def test_generate_key_varies(monkeypatch) -> None:
    rng = random.Random(1234)
    monkeypatch.setattr(random, "choices", rng.choices)
    assert len({generate_key() for _ in range(100)}) == 100


@pytest.mark.parametrize(
    "title, slug",
    [
        ("How to Brew Cold Coffee", "how-to-brew-cold-coffee"),
        ("Why *Rust* Matters: 2025 Edition", "why-rust-matters-2025-edition"),
        ("Tabs  vs -- spaces", "tabs-vs-spaces"),
        ("snake_case stays", "snake_case-stays"),
        ("Café Guide ½", "caf-guide-"),
        ("", ""),
    ],
)
def test_create_slug(title: str, slug: str) -> None:
    assert create_slug(title) == slug
