"""Word catalog, generation engine, models, and service APIs for mempw."""

from __future__ import annotations


def generate_password(min_length, replace_special_characters, **kwargs):
    from mempw.core.password_service import generate_password as _generate_password

    return _generate_password(min_length, replace_special_characters, **kwargs)


def generate_passwords(count, min_length, replace_special_characters, **kwargs):
    from mempw.core.password_service import generate_passwords as _generate_passwords

    return _generate_passwords(count, min_length, replace_special_characters, **kwargs)


__all__ = ["generate_password", "generate_passwords"]
