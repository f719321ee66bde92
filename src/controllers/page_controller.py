"""
Page Controller - One view lifetime of the portfolio page

Composes the typewriter, scroll/pointer trackers, navigation and the
contact form over a host Viewport, and owns their teardown.
"""

import random
from typing import Any, Dict, Optional, Union

from animations.engine import AnimationEngine, FrameSink
from animations.particles import ParticleGenerator
from animations.typewriter import TypewriterAnimation
from components.viewport import Viewport
from controllers.form_controller import FormController
from controllers.navigation_controller import NavigationController
from controllers.pointer_tracker import PointerTracker
from controllers.scroll_tracker import ScrollTracker
from managers.content_manager import ContentManager
from models.domain.particle import ParticleSet
from models.enums import FormField, SubmissionOutcome, ThemePreference
from services.service_container import ServiceContainer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)

HERO_ANIMATION = "hero"


class PageController:
    """
    Mount/unmount boundary for every timer and observer of the view.

    After unmount() returns no typewriter tick, shake timer, scroll,
    intersection or pointer callback runs again. A new view needs a new
    PageController; the ServiceContainer is shared between them.

    Example:
        page = PageController(services, SimulatedViewport(regions={"home": (0, 900)}))
        await page.mount()
        page.snapshot()["typewriter"]
        await page.unmount()
    """

    def __init__(
        self,
        services: ServiceContainer,
        viewport: Viewport,
        sink: Optional[FrameSink] = None,
        rng: Optional[random.Random] = None,
        owner: str = "page",
    ):
        self.services = services
        self.viewport = viewport
        self.owner = owner
        config = services.config

        self.engine = AnimationEngine(sink=sink, owner=owner)
        self.typewriter = TypewriterAnimation(
            config.typewriter.phrases,
            type_interval=config.typewriter.type_interval,
            delete_interval=config.typewriter.delete_interval,
            pause=config.typewriter.pause,
        )
        self.scroll = ScrollTracker(
            viewport,
            hero_region=config.scroll.hero_region,
            threshold=config.scroll.threshold,
            root_margin_top=config.scroll.root_margin_top,
        )
        self.navigation = NavigationController(
            viewport,
            mobile_breakpoint=config.navigation.mobile_breakpoint,
            mobile_offset=config.navigation.mobile_offset,
            desktop_offset=config.navigation.desktop_offset,
        )
        self.pointer = PointerTracker(viewport, radius=config.particles.glow_radius)
        self.form = FormController(
            services.message_sender,
            shake_duration=config.form.shake_duration,
            owner=owner,
        )
        self.particles = ParticleGenerator(rng)

        self._mounted = False
        self._unmounted = False

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        if self._unmounted:
            raise RuntimeError("PageController cannot be remounted after unmount")
        if self._mounted:
            return

        self.scroll.start()
        self.pointer.start()
        await self.engine.start(HERO_ANIMATION, self.typewriter)
        self._mounted = True
        log.info("Page mounted", owner=self.owner)

    async def unmount(self) -> None:
        if self._unmounted:
            return
        self._unmounted = True

        await self.engine.stop_all()
        self.scroll.teardown()
        self.pointer.teardown()
        self.form.teardown()
        self._mounted = False
        log.info("Page unmounted", owner=self.owner)

    # ------------------------------------------------------------
    # User interactions
    # ------------------------------------------------------------

    def toggle_theme(self) -> ThemePreference:
        return self.services.theme_service.toggle()

    def toggle_menu(self) -> bool:
        return self.navigation.toggle_menu()

    def navigate(self, href: str) -> Optional[float]:
        return self.navigation.navigate(href)

    def update_field(self, name: Union[FormField, str], value: str) -> None:
        self.form.update_field(name, value)

    async def submit(self) -> SubmissionOutcome:
        return await self.form.submit()

    # ------------------------------------------------------------
    # Presentation state
    # ------------------------------------------------------------

    def particle_set(self) -> ParticleSet:
        return self.particles.generate(self.services.config.particles.count)

    def snapshot(self) -> Dict[str, Any]:
        """Everything the presentation layer renders, as plain data"""
        form = self.form.state
        content = self.services.content
        glow_x, glow_y = self.pointer.glow_offset

        return {
            "theme": self.services.theme_service.get().value,
            "typewriter": self.typewriter.displayed,
            "navigation": {
                "solid": self.navigation.chrome_solid(self.scroll.chrome_solid),
                "menu_open": self.navigation.menu_open,
            },
            "scroll_top_visible": self.scroll.scroll_top_visible,
            "glow": {"left": glow_x, "top": glow_y},
            "form": {
                "fields": form.fields,
                "errors": form.errors,
                "phase": form.phase.name,
                "submitting": form.submitting,
                "succeeded": form.succeeded,
                "shaking": form.shaking,
                "notice": form.notice,
            },
            "particles": [p.to_style() for p in self.particle_set()],
            "skills": {
                category.value: [s.name for s in skills]
                for category, skills in ContentManager.skills_by_category(content).items()
            },
            "projects": [
                {
                    "title": p.title,
                    "description": p.description,
                    "tech": list(p.tech),
                    "image": p.image,
                    "link": p.link,
                }
                for p in content.projects
            ],
            "social_links": content.social_links.as_dict(),
        }
