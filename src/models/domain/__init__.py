"""Domain models - State snapshots and read-only content"""

from models.domain.typewriter import TypewriterState
from models.domain.scroll import ScrollSignals, IntersectionEntry
from models.domain.form import FormState, ContactPayload, EMPTY_FIELDS
from models.domain.particle import Particle, ParticleSet
from models.domain.content import Skill, Project, SocialLinks, ContentRegistry

__all__ = [
    "TypewriterState",
    "ScrollSignals",
    "IntersectionEntry",
    "FormState",
    "ContactPayload",
    "EMPTY_FIELDS",
    "Particle",
    "ParticleSet",
    "Skill",
    "Project",
    "SocialLinks",
    "ContentRegistry",
]
