"""
Tests for the static content registries.
"""

from managers.content_manager import ContentManager
from models.enums import SkillCategory


class TestContentManager:

    def test_bundled_content_loads(self):
        content = ContentManager().load()

        assert content.skills
        assert content.projects
        assert "github" in content.social_links.as_dict()

    def test_missing_file_gives_empty_registry(self, tmp_path):
        content = ContentManager(tmp_path / "missing.yaml").load()

        assert content.skills == ()
        assert content.projects == ()
        assert content.social_links.as_dict() == {}

    def test_project_defaults(self):
        content = ContentManager.parse({"projects": [{"title": "Demo"}]})
        project = content.projects[0]

        assert project.description == ""
        assert project.tech == ()
        assert project.link == "#"

    def test_unknown_skill_category_skipped(self):
        content = ContentManager.parse({"skills": [
            {"name": "Cooking", "category": "Kitchen"},
            {"name": "Jest", "category": "Testing"},
        ]})

        assert [s.name for s in content.skills] == ["Jest"]

    def test_skills_grouped_in_registry_order(self, content):
        grouped = ContentManager.skills_by_category(content)

        assert [s.name for s in grouped[SkillCategory.CORE]] == ["React", "TypeScript"]
        assert [s.name for s in grouped[SkillCategory.TESTING]] == ["Jest"]
        assert grouped[SkillCategory.TOOLS] == ()
