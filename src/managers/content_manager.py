"""
Content Manager

Loads the static content registries (skills, projects, social links)
from content.yaml into immutable models. The engine never mutates them.
"""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

from models.domain.content import ContentRegistry, Project, Skill, SocialLinks
from models.enums import SkillCategory
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent


class ContentManager:
    """
    Example:
        content = ContentManager().load()
        content.projects[0].title
        ContentManager.skills_by_category(content)[SkillCategory.CORE]
    """

    def __init__(self, content_path: Union[str, Path] = "config/content.yaml"):
        path = Path(content_path)
        self.content_path = path if path.is_absolute() else SRC_DIR / path
        self.registry = ContentRegistry()

    def load(self) -> ContentRegistry:
        try:
            with open(self.content_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            self.registry = self.parse(data)
        except Exception as ex:
            log.error(f"Failed to load {self.content_path.name}, using empty content", error=str(ex))
            self.registry = ContentRegistry()

        log.info(
            "Content loaded",
            skills=len(self.registry.skills),
            projects=len(self.registry.projects),
        )
        return self.registry

    @staticmethod
    def parse(data: Dict[str, Any]) -> ContentRegistry:
        """Build the registry from already-decoded YAML data."""
        skills = []
        for item in data.get("skills") or []:
            try:
                category = SkillCategory(item["category"])
            except ValueError:
                log.warn(f"Skill '{item.get('name')}' has unknown category {item['category']!r}, skipped")
                continue
            skills.append(Skill(name=str(item["name"]), category=category))

        projects = tuple(
            Project(
                title=str(item["title"]),
                description=str(item.get("description", "")),
                tech=tuple(str(t) for t in item.get("tech") or []),
                image=str(item.get("image", "")),
                link=str(item.get("link", "#")),
            )
            for item in data.get("projects") or []
        )
        social = SocialLinks(**(data.get("social_links") or {}))
        return ContentRegistry(skills=tuple(skills), projects=projects, social_links=social)

    @staticmethod
    def skills_by_category(registry: ContentRegistry) -> Dict[SkillCategory, Tuple[Skill, ...]]:
        """Skills grouped for rendering, registry order preserved within each group."""
        grouped: Dict[SkillCategory, List[Skill]] = {category: [] for category in SkillCategory}
        for skill in registry.skills:
            grouped[skill.category].append(skill)
        return {category: tuple(items) for category, items in grouped.items()}
