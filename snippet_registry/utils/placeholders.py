"""Placeholder scanning for template bodies."""
import re
from typing import List, Tuple

from ..core.exceptions import MalformedTemplateError

TOKEN_START = "${"
TOKEN_END = "}"

IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

# A segment is either ("text", literal) or ("placeholder", identifier)
TEXT = "text"
PLACEHOLDER = "placeholder"
Segment = Tuple[str, str]


class PlaceholderScanner:
    """
    Left-to-right tokenizer for ${identifier} placeholders.

    `${` opens a token and the next `}` closes it. Everything else is
    literal text. There is no escaping, so a literal `${` cannot appear
    in a body.
    """

    @staticmethod
    def scan(body: str, template_name: str = "<template>") -> List[Segment]:
        """
        Split a body into literal and placeholder segments.

        Args:
            body: Template body to scan
            template_name: Name used in error messages

        Returns:
            Ordered list of (kind, value) segments

        Raises:
            MalformedTemplateError: On an unterminated, empty or invalid token
        """
        segments: List[Segment] = []
        position = 0
        length = len(body)

        while position < length:
            start = body.find(TOKEN_START, position)
            if start == -1:
                segments.append((TEXT, body[position:]))
                break

            if start > position:
                segments.append((TEXT, body[position:start]))

            end = body.find(TOKEN_END, start + len(TOKEN_START))
            if end == -1:
                raise MalformedTemplateError(template_name, start, "unterminated placeholder")

            identifier = body[start + len(TOKEN_START):end]
            if not identifier:
                raise MalformedTemplateError(template_name, start, "empty placeholder")
            if not IDENTIFIER_PATTERN.fullmatch(identifier):
                raise MalformedTemplateError(
                    template_name, start, f"invalid placeholder identifier '{identifier}'"
                )

            segments.append((PLACEHOLDER, identifier))
            position = end + len(TOKEN_END)

        return segments

    @staticmethod
    def identifiers(segments: List[Segment]) -> Tuple[str, ...]:
        """Get placeholder identifiers in first-occurrence order, without repeats."""
        seen = []
        for kind, value in segments:
            if kind == PLACEHOLDER and value not in seen:
                seen.append(value)
        return tuple(seen)

    @staticmethod
    def is_valid_identifier(identifier: str) -> bool:
        """Check if a string can be used as a placeholder identifier."""
        return bool(IDENTIFIER_PATTERN.fullmatch(identifier))
