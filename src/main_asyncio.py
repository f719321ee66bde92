"""
main_asyncio.py — Console entry point for the portfolio interaction engine
--------------------------------------------------------------------------

Responsible for:
- loading configuration and page content
- wiring services and the page view (Dependency Injection)
- rendering the hero typewriter to the terminal on a simulated viewport
- graceful shutdown on Ctrl +C / SIGTERM
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX
# ---------------------------------------------------------------------------

# Log lines use box-drawing and status symbols
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import asyncio
from pathlib import Path

from components import RootClassList, SimulatedViewport
from controllers import PageController
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import PageShutdownHandler, TaskCancellationHandler
from lifecycle.task_registry import create_tracked_task, TaskCategory
from managers import ConfigManager, ContentManager
from models.domain.typewriter import TypewriterState
from models.enums import LogCategory, TypewriterPhase
from services import JsonPreferenceStore, ServiceContainer
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)

SRC_DIR = Path(__file__).resolve().parent

# Section layout of the simulated page: id → (top, height) in px
PAGE_REGIONS = {
    "home": (0, 900),
    "about": (900, 700),
    "skills": (1600, 800),
    "projects": (2400, 1200),
    "contact": (3600, 900),
}

TOUR_STOP_SECONDS = 4.0


# ---------------------------------------------------------------------------
# TERMINAL RENDERING
# ---------------------------------------------------------------------------

def render_frame(key: str, state: TypewriterState) -> None:
    """Redraw the hero line in place"""
    cursor = " " if state.phase is TypewriterPhase.PAUSING else "|"
    sys.stdout.write(f"\r  {state.displayed}{cursor}\033[K")
    sys.stdout.flush()


async def scroll_tour(page: PageController) -> None:
    """Walk the simulated page section by section, logging the chrome signals"""
    try:
        while True:
            for section in PAGE_REGIONS:
                await asyncio.sleep(TOUR_STOP_SECONDS)
                page.navigate(f"#{section}")
                snapshot = page.snapshot()
                sys.stdout.write("\n")
                log.info(
                    f"Viewing #{section}",
                    solid_nav=snapshot["navigation"]["solid"],
                    scroll_top=snapshot["scroll_top_visible"],
                )
    except asyncio.CancelledError:
        log.debug("Scroll tour cancelled")
        raise


# ---------------------------------------------------------------------------
# Application Entry
# ---------------------------------------------------------------------------

async def main():
    """Main async entry point (dependency injection and event loop startup)."""

    # ========================================================================
    # 1. CONFIGURATION
    # ========================================================================

    config = ConfigManager().load()
    configure_logger(config.logging.level, config.logging.use_colors)
    content = ContentManager().load()

    log.info("Starting portfolio interaction engine...")

    # ========================================================================
    # 2. SERVICES
    # ========================================================================

    store = JsonPreferenceStore(SRC_DIR / config.theme.storage_path)
    services = ServiceContainer.build(config, content, store, RootClassList())

    # ========================================================================
    # 3. PAGE VIEW
    # ========================================================================

    viewport = SimulatedViewport(width=1280, height=800, regions=PAGE_REGIONS)
    page = PageController(services, viewport, sink=render_frame)
    await page.mount()

    tour_task = create_tracked_task(
        scroll_tour(page),
        category=TaskCategory.SYSTEM,
        description="Simulated scroll tour",
    )

    # ============================================================
    # 4. SHUTDOWN COORDINATOR
    # ============================================================

    coordinator = ShutdownCoordinator()
    coordinator.register(PageShutdownHandler(page))
    coordinator.register(TaskCancellationHandler())

    loop = asyncio.get_running_loop()
    coordinator.setup_signal_handlers(loop)

    log.info("🏁 Page mounted. Waiting for exit signal...", theme=services.theme_service.get().value)

    await coordinator.wait_for_shutdown()
    sys.stdout.write("\n")

    await coordinator.shutdown_all()
    log.info("👋 Shut down cleanly.", tour_cancelled=tour_task.cancelled())


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    except Exception as e:
        log.error(f"Fatal error: {e}", error_type=type(e).__name__)
        sys.exit(1)
