"""
ILO Models

The five-field ABCD record being built by the wizard, and the sentence
derived from it.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field

from ilo.content import BloomLevel
from ilo.exceptions import InvalidFieldValueError, UnknownFieldError


SENTENCE_PREFIX = "By the end of this tutorial,"

# Accepted field paths mapped to (container, attribute).
_FIELD_PATHS = {
    "audience": (None, "audience"),
    "condition": (None, "condition"),
    "degree": (None, "degree"),
    "behavior.level": ("behavior", "level"),
    "behavior.verb": ("behavior", "verb"),
    "behavior.task": ("behavior", "task"),
    "behavior.verbAndTask": ("behavior", "verb_and_task"),
    "behavior.verb_and_task": ("behavior", "verb_and_task"),
}


class Behavior(BaseModel):
    """The B of ABCD: cognitive level plus what the learner will do."""

    level: Optional[BloomLevel] = Field(default=None, description="Bloom level; None until chosen")
    verb: str = Field(default="", description="Action verb")
    task: str = Field(default="", description="Task or content the verb acts on")
    verb_and_task: str = Field(default="", description="Combined verb and task shown in the sentence")


class ILO(BaseModel):
    """Intended Learning Outcome in ABCD form."""

    audience: str = ""
    behavior: Behavior = Field(default_factory=Behavior)
    condition: str = ""
    degree: str = ""

    @property
    def sentence(self) -> str:
        return derive_sentence(self)

    def set_field(self, field_path: str, value: Union[str, BloomLevel, None]) -> None:
        """
        Set one leaf of the record.

        Editing `behavior.verb` or `behavior.task` recomputes `verb_and_task`
        from the two parts; editing `behavior.verbAndTask` writes it directly
        and leaves the parts alone. No value is checked for emptiness.
        """
        if field_path not in _FIELD_PATHS:
            raise UnknownFieldError(field_path)
        container, attribute = _FIELD_PATHS[field_path]

        if attribute == "level":
            self.behavior.level = _coerce_level(value)
            return

        text = "" if value is None else str(value)
        if container is None:
            setattr(self, attribute, text)
            return

        setattr(self.behavior, attribute, text)
        # The edited path decides: only verb or task edits rebuild the combined text.
        if attribute in ("verb", "task"):
            self.behavior.verb_and_task = f"{self.behavior.verb} {self.behavior.task}".strip()


def _coerce_level(value: Union[str, BloomLevel, None]) -> Optional[BloomLevel]:
    if value is None or value == "":
        return None
    try:
        return BloomLevel(value)
    except ValueError:
        raise InvalidFieldValueError(
            "behavior.level", str(value), [level.value for level in BloomLevel]
        ) from None


def derive_sentence(ilo: ILO) -> str:
    """
    Compose the outcome statement from the record.

    Empty fields leave gaps rather than failing. The result always ends
    with terminal punctuation.
    """
    sentence = (
        f"{SENTENCE_PREFIX} {ilo.audience} will be able to "
        f"{ilo.behavior.verb_and_task} {ilo.condition} {ilo.degree}"
    ).strip()
    if not sentence.endswith((".", "!", "?")):
        sentence += "."
    return sentence
