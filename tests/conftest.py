"""
Shared fixtures for the interaction engine test suite.

src/ is put on sys.path by [tool.pytest.ini_options] pythonpath.
"""

import random
from typing import List, Optional

import pytest

from components import RootClassList, SimulatedViewport
from lifecycle.task_registry import TaskRegistry
from models.config import EngineConfig, FormConfig, TypewriterConfig
from models.domain.content import ContentRegistry, Project, Skill, SocialLinks
from models.domain.form import ContactPayload
from models.enums import SkillCategory
from models.errors import SubmissionError
from services import MemoryPreferenceStore, ServiceContainer, ThemeService

PAGE_REGIONS = {
    "home": (0, 900),
    "about": (900, 700),
    "contact": (1600, 900),
}


class RecordingSender:
    """Message sender that accepts everything and remembers it"""

    def __init__(self):
        self.sent: List[ContactPayload] = []

    async def send(self, payload: ContactPayload) -> None:
        self.sent.append(payload)


class RejectingSender:
    """Message sender whose collaborator always fails"""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error or SubmissionError("HTTP 500", status_code=500)
        self.attempts = 0

    async def send(self, payload: ContactPayload) -> None:
        self.attempts += 1
        raise self.error


@pytest.fixture(autouse=True)
def fresh_task_registry():
    """Each test starts with an empty task registry"""
    TaskRegistry._instance = None
    yield
    TaskRegistry._instance = None


@pytest.fixture
def viewport():
    return SimulatedViewport(width=1280, height=800, regions=PAGE_REGIONS)


@pytest.fixture
def fast_config():
    """Factory defaults with timings short enough for real-time tests"""
    return EngineConfig(
        typewriter=TypewriterConfig(
            phrases=("Hi", "Yo"),
            type_interval=0.005,
            delete_interval=0.005,
            pause=0.01,
        ),
        form=FormConfig(shake_duration=0.02),
    )


@pytest.fixture
def content():
    return ContentRegistry(
        skills=(
            Skill("React", SkillCategory.CORE),
            Skill("Jest", SkillCategory.TESTING),
            Skill("TypeScript", SkillCategory.CORE),
        ),
        projects=(Project("Design System", "Component library", tech=("React",)),),
        social_links=SocialLinks(github="https://github.com/someone"),
    )


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def services(fast_config, content, sender):
    return ServiceContainer(
        config=fast_config,
        content=content,
        theme_service=ThemeService(MemoryPreferenceStore(), RootClassList()),
        message_sender=sender,
    )


@pytest.fixture
def rng():
    return random.Random(1234)
