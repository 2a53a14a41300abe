"""Template data model."""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..utils.placeholders import PlaceholderScanner, Segment


@dataclass(frozen=True)
class Template:
    """A named body of text with ${identifier} placeholders."""
    name: str
    body: str
    description: Optional[str] = None
    segments: Tuple[Segment, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def parse(cls, name: str, body: str, description: Optional[str] = None) -> "Template":
        """Build a template, validating every placeholder token in the body."""
        segments = PlaceholderScanner.scan(body, name)
        return cls(name=name, body=body, description=description, segments=tuple(segments))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        """Placeholder identifiers referenced by the body."""
        return PlaceholderScanner.identifiers(list(self.segments))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "body": self.body,
            "placeholders": list(self.placeholders),
        }
