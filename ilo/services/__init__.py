"""ILO wizard and enhancement services."""
from ilo.services.enhancement_client import EnhancementClient, EnhancementClientConfig
from ilo.services.enhancement_service import EnhancementService
from ilo.services.loading_announcer import LoadingAnnouncer
from ilo.services.section_parser import parse_sections
from ilo.services.wizard import WizardController

__all__ = [
    "EnhancementClient",
    "EnhancementClientConfig",
    "EnhancementService",
    "LoadingAnnouncer",
    "parse_sections",
    "WizardController",
]
