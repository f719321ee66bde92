"""Read-only content registries (skills, projects, social links)"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from models.enums import SkillCategory


@dataclass(frozen=True)
class Skill:
    name: str
    category: SkillCategory


@dataclass(frozen=True)
class Project:
    title: str
    description: str
    tech: Tuple[str, ...] = ()
    image: str = ""
    link: str = "#"


@dataclass(frozen=True)
class SocialLinks:
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    whatsapp: Optional[str] = None
    email: Optional[str] = None

    def as_dict(self) -> Dict[str, str]:
        """Only the links that are configured"""
        return {
            name: value
            for name, value in (
                ("github", self.github),
                ("linkedin", self.linkedin),
                ("twitter", self.twitter),
                ("whatsapp", self.whatsapp),
                ("email", self.email),
            )
            if value
        }


@dataclass(frozen=True)
class ContentRegistry:
    """Static page content, supplied fully formed to the presentation layer"""
    skills: Tuple[Skill, ...] = ()
    projects: Tuple[Project, ...] = ()
    social_links: SocialLinks = field(default_factory=SocialLinks)
