"""Theme service - Light/dark preference with durable persistence"""

from typing import Optional

from components.document_root import DocumentRoot
from models.enums import ThemePreference
from models.errors import PersistenceError
from services.preference_store import PreferenceStore
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.THEME)

DARK_CLASS = "dark"


class ThemeService:
    """
    Process-wide light/dark preference.

    - Loads the stored value once at construction (default LIGHT when
      missing, unreadable or not "light"/"dark")
    - Every change re-classes the document root and writes the store,
      and so does construction, so a reload restores the last choice
    - Storage failures are logged and otherwise ignored: the in-memory
      preference stays authoritative for this session
    """

    def __init__(self, store: PreferenceStore, root: DocumentRoot, storage_key: str = "theme"):
        self.store = store
        self.root = root
        self.storage_key = storage_key

        self._preference = self._load()
        self._sync()

        log.info(f"Theme initialized: {self._preference.value}")

    # === Internal Methods ===

    def _load(self) -> ThemePreference:
        try:
            raw: Optional[str] = self.store.get(self.storage_key)
        except (PersistenceError, OSError) as e:
            log.warn(f"Theme preference unavailable, using default: {e}")
            return ThemePreference.LIGHT

        if raw is None:
            return ThemePreference.LIGHT
        try:
            return ThemePreference(raw)
        except ValueError:
            log.warn(f"Ignoring unknown stored theme: {raw!r}")
            return ThemePreference.LIGHT

    def _sync(self) -> None:
        """Apply the preference to the document root and persist it."""
        if self._preference is ThemePreference.DARK:
            self.root.add(DARK_CLASS)
        else:
            self.root.remove(DARK_CLASS)

        try:
            self.store.set(self.storage_key, self._preference.value)
        except (PersistenceError, OSError) as e:
            log.warn(f"Failed to persist theme preference: {e}")

    # === Public API ===

    def get(self) -> ThemePreference:
        return self._preference

    @property
    def is_dark(self) -> bool:
        return self._preference is ThemePreference.DARK

    def set(self, preference: ThemePreference) -> None:
        previous = self._preference
        self._preference = preference
        self._sync()
        if previous is not preference:
            log.info("Theme changed", previous=previous.value, current=preference.value)

    def toggle(self) -> ThemePreference:
        """Flip light ↔ dark. Returns the new preference."""
        self.set(self._preference.flipped())
        return self._preference
