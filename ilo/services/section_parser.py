"""Split a heading-delimited enhancement reply into titled sections."""
import re
from typing import List

from ilo.models.session_state import EnhancementSection

HEADING_SIGIL = "###"

_HEADING_BOUNDARY = re.compile(rf"^(?={re.escape(HEADING_SIGIL)})", re.MULTILINE)


def parse_sections(text: str) -> List[EnhancementSection]:
    """
    Parse raw enhancement text into sections, in order of appearance.

    A section starts at every line beginning with "###". The first line of
    each chunk is its title (sigil and surrounding whitespace removed); the
    remaining lines, trimmed, are its content. Text with no heading at all
    becomes one untitled section holding the whole text, so the result is
    never empty.

    Args:
        text: Raw reply from the enhancement service

    Returns:
        List of EnhancementSection, never empty
    """
    text = text or ""
    if not _HEADING_BOUNDARY.search(text):
        return [EnhancementSection(title="", content=text.strip())]

    sections = []
    for chunk in _HEADING_BOUNDARY.split(text):
        # Only whitespace can precede the first heading without forming a chunk.
        if not chunk.strip():
            continue
        # Lines end at "\n" only, matching the boundary regex; other separators stay in the text.
        title_line, _, rest = chunk.partition("\n")
        title = title_line.strip().lstrip("#").strip()
        content = rest.strip()
        sections.append(EnhancementSection(title=title, content=content))
    return sections
