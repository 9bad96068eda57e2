import re

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}")
_PASSWORD_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[!@#$%^&*])[A-Za-z\d!@#$%^&*]{8,}",
    re.ASCII,
)


def is_valid_email(value) -> bool:
    """
    Loose ``local@domain.tld`` shape check: no whitespace or extra ``@`` in
    any part and a top-level domain of at least two characters.
    """
    return isinstance(value, str) and _EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_password(value) -> bool:
    """
    Ensures that the password meets the complexity requirements:
    - minimum length of 8 characters
    - at least one lowercase and one uppercase letter
    - at least one number
    - at least one of the symbols !@#$%^&*
    - no characters outside letters, digits and those symbols
    """
    return isinstance(value, str) and _PASSWORD_PATTERN.fullmatch(value) is not None
