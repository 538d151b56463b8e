"""
Random data generators.

All randomness comes from the ``secrets`` module. Generators ignore their
text input; their parameters arrive as keyword arguments.
"""

import secrets
import string
from datetime import datetime, timezone

CHARSETS = {
    "alphanumeric": string.ascii_letters + string.digits,
    "alpha": string.ascii_letters,
    "numeric": string.digits,
    "hex": "0123456789abcdef",
}

PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

MAX_GENERATED_LENGTH = 4096

LOREM_WORDS = [
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit",
    "sed", "do", "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "dolore",
    "magna", "aliqua", "enim", "ad", "minim", "veniam", "quis", "nostrud",
    "exercitation", "ullamco", "laboris", "nisi", "aliquip", "ex", "ea", "commodo",
    "consequat", "duis", "aute", "irure", "in", "reprehenderit", "voluptate",
    "velit", "esse", "cillum", "fugiat", "nulla", "pariatur", "excepteur", "sint",
    "occaecat", "cupidatat", "non", "proident", "sunt", "culpa", "qui", "officia",
    "deserunt", "mollit", "anim", "id", "est", "laborum", "at", "vero", "eos",
    "accusamus", "iusto", "odio", "dignissimos", "ducimus", "blanditiis",
    "praesentium", "voluptatum", "deleniti", "atque", "corrupti", "quos",
    "dolores", "quas", "molestias", "excepturi", "obcaecati", "cupiditate",
]

SLUG_WORDS = [
    "quick", "brown", "fox", "lazy", "dog", "bright", "sunny", "day",
    "cool", "fresh", "new", "hot", "cold", "warm", "fast", "slow",
    "big", "small", "red", "blue", "green", "happy", "sad", "great",
]

USERNAME_ADJECTIVES = ["happy", "cool", "fast", "clever", "bright", "swift", "bold", "calm"]
USERNAME_NOUNS = ["tiger", "eagle", "wolf", "bear", "fox", "hawk", "lion", "deer"]

CARD_LENGTHS = {"visa": 16, "mastercard": 16, "amex": 15}

RANDOM_DATE_START = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(int(value), high))


def _random_chars(alphabet: str, length: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_password(
    length: int = 16,
    uppercase: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
) -> str:
    """Random password from the enabled character classes (all letters and digits if none)."""
    alphabet = ""
    if uppercase:
        alphabet += string.ascii_uppercase
    if lowercase:
        alphabet += string.ascii_lowercase
    if numbers:
        alphabet += string.digits
    if symbols:
        alphabet += PASSWORD_SYMBOLS
    if not alphabet:
        alphabet = CHARSETS["alphanumeric"]
    return _random_chars(alphabet, _clamp(length, 1, MAX_GENERATED_LENGTH))


def generate_random_string(length: int = 32, charset: str = "alphanumeric") -> str:
    alphabet = CHARSETS.get(charset, CHARSETS["alphanumeric"])
    return _random_chars(alphabet, _clamp(length, 1, MAX_GENERATED_LENGTH))


def generate_lorem_ipsum(paragraphs: int = 1, words_per_paragraph: int = 50) -> str:
    """Paragraphs of placeholder words separated by blank lines."""
    result = []
    for _ in range(_clamp(paragraphs, 1, 50)):
        words = [
            secrets.choice(LOREM_WORDS)
            for _ in range(_clamp(words_per_paragraph, 1, 1000))
        ]
        words[0] = words[0].capitalize()
        result.append(" ".join(words) + ".")
    return "\n\n".join(result)


def generate_slug(words: int = 3) -> str:
    return "-".join(secrets.choice(SLUG_WORDS) for _ in range(_clamp(words, 1, 20)))


def generate_ipv4() -> str:
    return ".".join(str(secrets.randbelow(256)) for _ in range(4))


def generate_ipv6() -> str:
    return ":".join(f"{secrets.randbelow(0x10000):04x}" for _ in range(8))


def generate_mac_address(separator: str = ":") -> str:
    return separator.join(f"{secrets.randbelow(256):02x}" for _ in range(6))


def generate_api_key(prefix: str = "sk") -> str:
    """'sk_' followed by 32 alphanumeric characters."""
    return f"{prefix}_{generate_random_string(32)}"


def generate_random_username() -> str:
    adjective = secrets.choice(USERNAME_ADJECTIVES)
    noun = secrets.choice(USERNAME_NOUNS)
    return f"{adjective}_{noun}{secrets.randbelow(1000)}"


def generate_random_email(domain: str = "example.com") -> str:
    username = generate_random_string(8, "alpha").lower()
    return f"{username}@{domain.strip() or 'example.com'}"


def generate_random_phone(format: str = "us") -> str:
    if format == "international":
        country = secrets.randbelow(99) + 1
        number = "".join(str(secrets.randbelow(10)) for _ in range(10))
        return f"+{country} {number}"
    area = secrets.randbelow(900) + 100
    exchange = secrets.randbelow(900) + 100
    subscriber = secrets.randbelow(9000) + 1000
    return f"({area}) {exchange}-{subscriber}"


def generate_random_date() -> str:
    """ISO timestamp between 2020-01-01 and now (UTC)."""
    now = datetime.now(timezone.utc)
    span_ms = int((now - RANDOM_DATE_START).total_seconds() * 1000)
    moment = datetime.fromtimestamp(
        RANDOM_DATE_START.timestamp() + secrets.randbelow(span_ms) / 1000, tz=timezone.utc
    )
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def luhn_check_digit(partial: str) -> int:
    """Check digit that makes ``partial`` + digit pass the Luhn test."""
    total = 0
    # The rightmost digit of the partial number is doubled once the check digit is appended
    for position, char in enumerate(reversed(partial)):
        digit = int(char)
        if position % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def is_luhn_valid(number: str) -> bool:
    return number.isdigit() and luhn_check_digit(number[:-1]) == int(number[-1])


def generate_test_credit_card(type: str = "visa") -> str:
    """Luhn-valid card number for test fixtures. Never a real account."""
    if type == "mastercard":
        prefix = "5" + str(secrets.randbelow(5) + 1)
    elif type == "amex":
        prefix = "3" + secrets.choice("47")
    else:
        type, prefix = "visa", "4"

    partial = prefix + "".join(
        str(secrets.randbelow(10)) for _ in range(CARD_LENGTHS[type] - len(prefix) - 1)
    )
    return partial + str(luhn_check_digit(partial))
