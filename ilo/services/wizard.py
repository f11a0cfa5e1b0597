"""
Wizard Controller

Owns the step position of an ABCD wizard session and the one-shot
enhancement action available on the review step.

Steps: 0 Audience, 1 Behavior, 2 Condition, 3 Degree, 4 Review.
Navigation is never blocked by empty fields.
"""

import json
import logging
from typing import List, Optional, Union

from ilo.content import (
    GUIDING_QUESTIONS,
    PLACEHOLDERS,
    REVIEW_STEP,
    STEP_FIELDS,
    STEPS,
    TIPS,
    VERB_EXAMPLES,
    BloomLevel,
)
from ilo.exceptions import EnhancementError, StepOutOfRangeError
from ilo.models.session_state import EnhancementSection, EnhancementStatus, WizardSession
from ilo.services.enhancement_client import EnhancementClient
from ilo.services.loading_announcer import LoadingAnnouncer

logger = logging.getLogger(__name__)


class WizardController:
    """State machine over one WizardSession."""

    def __init__(
        self,
        enhancement_client: EnhancementClient,
        announcer: Optional[LoadingAnnouncer] = None,
        session: Optional[WizardSession] = None,
    ):
        self.enhancement_client = enhancement_client
        self.announcer = announcer
        self.session = session or WizardSession()

    # ─── Navigation ───────────────────────────────────────────────────

    @property
    def current_step(self) -> int:
        return self.session.current_step

    def next(self) -> int:
        self.session.move_to(min(REVIEW_STEP, self.session.current_step + 1))
        return self.session.current_step

    def prev(self) -> int:
        self.session.move_to(max(0, self.session.current_step - 1))
        return self.session.current_step

    def jump(self, step: int) -> int:
        if not 0 <= step <= REVIEW_STEP:
            raise StepOutOfRangeError(step, REVIEW_STEP)
        self.session.move_to(step)
        return self.session.current_step

    def restart(self) -> None:
        """Discard the ILO and any enhancement result and return to the first step."""
        if self.announcer is not None:
            self.announcer.stop()
        logger.info(json.dumps({"event": "wizard_restart", "session_id": self.session.session_id}))
        self.session = WizardSession()

    # ─── ILO access ───────────────────────────────────────────────────

    def set_field(self, field_path: str, value: Union[str, BloomLevel, None]) -> None:
        self.session.ilo.set_field(field_path, value)

    @property
    def sentence(self) -> str:
        return self.session.ilo.sentence

    @property
    def preview(self) -> Optional[str]:
        """The live sentence before the review step; the review step shows the result instead."""
        return self.sentence if self.show_preview else None

    @property
    def sections(self) -> List[EnhancementSection]:
        return list(self.session.sections)

    @property
    def is_enhancement_pending(self) -> bool:
        return self.session.is_enhancement_pending

    @property
    def has_requested_enhancement(self) -> bool:
        return self.session.has_requested_enhancement

    @property
    def enhancement_status(self) -> EnhancementStatus:
        return self.session.enhancement_status

    @property
    def enhancement_error(self) -> Optional[str]:
        return self.session.enhancement_error

    # ─── Presentation helpers ─────────────────────────────────────────

    @property
    def steps(self) -> List[str]:
        return list(STEPS)

    @property
    def step_name(self) -> str:
        return STEPS[self.session.current_step]

    @property
    def is_review_step(self) -> bool:
        return self.session.current_step == REVIEW_STEP

    @property
    def show_preview(self) -> bool:
        return self.session.current_step < REVIEW_STEP

    @property
    def can_go_back(self) -> bool:
        return self.session.current_step > 0

    @property
    def next_label(self) -> str:
        return "Finish" if self.session.current_step == REVIEW_STEP - 1 else "Next"

    @property
    def progress_percentage(self) -> float:
        return (self.session.current_step + 1) / len(STEPS) * 100

    @property
    def tip(self) -> str:
        return TIPS[self.step_name]

    @property
    def placeholder(self) -> Optional[str]:
        """Example text for the field edited on the current step."""
        field_path = STEP_FIELDS.get(self.step_name)
        return PLACEHOLDERS[field_path] if field_path else None

    @property
    def verb_examples(self) -> Optional[str]:
        level = self.session.ilo.behavior.level
        return VERB_EXAMPLES[level] if level else None

    @property
    def guiding_question(self) -> Optional[str]:
        level = self.session.ilo.behavior.level
        return GUIDING_QUESTIONS[level] if level else None

    # ─── Enhancement ──────────────────────────────────────────────────

    async def enhance(self) -> List[EnhancementSection]:
        """
        Submit the current sentence for feedback, at most once per session.

        A call while a request is pending, or after one has succeeded, is a
        no-op that returns the current sections. A failed request leaves
        the allowance unused so the user can try again.
        """
        session = self.session
        if not session.can_request_enhancement:
            logger.info(json.dumps({
                "event": "enhance_skipped",
                "session_id": session.session_id,
                "status": session.enhancement_status.value,
            }))
            return list(session.sections)

        # Set before the first await so a second caller sees PENDING.
        session.begin_enhancement()
        if self.announcer is not None:
            self.announcer.start()

        try:
            sections = await self.enhancement_client.enhance(session.ilo.sentence)
        except EnhancementError as e:
            logger.error(json.dumps({
                "event": "enhance_failed",
                "session_id": session.session_id,
                "error": str(e),
            }))
            session.fail_enhancement(str(e))
            return []
        else:
            session.complete_enhancement(sections)
        finally:
            if self.announcer is not None and session is self.session:
                self.announcer.stop()
            if session.is_enhancement_pending:
                session.fail_enhancement("Enhancement was interrupted")

        logger.info(json.dumps({
            "event": "enhance_succeeded",
            "session_id": session.session_id,
            "sections": len(sections),
        }))
        return list(sections)
