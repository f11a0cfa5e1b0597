"""
Wizard Session State Models

Tracks the wizard's step position, the ILO under construction, and the
one-shot enhancement round-trip.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
import uuid

from ilo.content import REVIEW_STEP
from ilo.models.ilo import ILO


class EnhancementStatus(str, Enum):
    """Lifecycle of the session's single enhancement request."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class EnhancementSection(BaseModel):
    """One titled block of an enhancement reply."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class WizardSession(BaseModel):
    """Complete state for one pass through the wizard."""

    session_id: str = Field(
        default_factory=lambda: f"ilo_{uuid.uuid4().hex[:12]}",
        description="Unique session identifier",
    )
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    ilo: ILO = Field(default_factory=ILO)
    current_step: int = Field(default=0, ge=0, le=REVIEW_STEP)

    enhancement_status: EnhancementStatus = EnhancementStatus.IDLE
    enhancement_error: Optional[str] = None
    sections: list[EnhancementSection] = Field(default_factory=list)

    @property
    def has_requested_enhancement(self) -> bool:
        return self.enhancement_status == EnhancementStatus.SUCCEEDED

    @property
    def is_enhancement_pending(self) -> bool:
        return self.enhancement_status == EnhancementStatus.PENDING

    @property
    def can_request_enhancement(self) -> bool:
        return self.enhancement_status in (EnhancementStatus.IDLE, EnhancementStatus.FAILED)

    def begin_enhancement(self) -> None:
        self.enhancement_status = EnhancementStatus.PENDING
        self.enhancement_error = None
        self.updated_at = datetime.utcnow()

    def complete_enhancement(self, sections: list[EnhancementSection]) -> None:
        self.sections = list(sections)
        self.enhancement_status = EnhancementStatus.SUCCEEDED
        self.updated_at = datetime.utcnow()

    def fail_enhancement(self, error: str) -> None:
        self.sections = []
        self.enhancement_status = EnhancementStatus.FAILED
        self.enhancement_error = error
        self.updated_at = datetime.utcnow()

    def move_to(self, step: int) -> None:
        self.current_step = step
        self.updated_at = datetime.utcnow()
