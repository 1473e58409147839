import re
from typing import Optional

_ID_PATTERN = re.compile(r"^\+?\d+$")


class IDValidator:
    """Parses the integer identifiers typed at the console."""

    @staticmethod
    def parse_id(raw: Optional[str]) -> int:
        s = (raw or "").strip()
        if not _ID_PATTERN.match(s):
            raise ValueError(f"invalid ID '{s}': expected a positive integer")
        value = int(s)
        if value <= 0:
            raise ValueError(f"invalid ID '{s}': expected a positive integer")
        return value


class TextValidator:
    """Very basic text validations for titles, authors and member names."""

    @staticmethod
    def _is_non_blank(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator._is_non_blank(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        # must not be digits only
        if not TextValidator._is_non_blank(author):
            return False
        return not author.strip().isdigit()

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        return TextValidator.validate_author(name)
