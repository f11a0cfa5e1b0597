"""ILO wizard models."""
from ilo.models.ilo import ILO, Behavior, derive_sentence
from ilo.models.session_state import EnhancementSection, EnhancementStatus, WizardSession

__all__ = [
    "ILO",
    "Behavior",
    "derive_sentence",
    "EnhancementSection",
    "EnhancementStatus",
    "WizardSession",
]
