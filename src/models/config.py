"""
Engine configuration models

Immutable configuration loaded from engine.yaml by ConfigManager.
Default values defined here are the factory defaults used whenever the
YAML file is missing, invalid, or omits a key.
"""

from dataclasses import dataclass, field
from typing import Tuple

from models.enums import LogLevel


@dataclass(frozen=True)
class TypewriterConfig:
    """Hero typewriter timing (seconds)"""
    phrases: Tuple[str, ...] = ("Your Name", "Frontend Developer")
    type_interval: float = 0.08
    delete_interval: float = 0.04
    pause: float = 2.5


@dataclass(frozen=True)
class ScrollConfig:
    """Scroll-derived chrome signals"""
    threshold: float = 20.0         # px of vertical offset before chrome turns solid
    hero_region: str = "home"       # top landmark observed for scroll-to-top visibility
    root_margin_top: float = -80.0  # negative: flips before the landmark fully leaves view


@dataclass(frozen=True)
class NavigationConfig:
    """Anchor navigation offsets (px)"""
    mobile_breakpoint: float = 768.0
    mobile_offset: float = 70.0
    desktop_offset: float = 100.0


@dataclass(frozen=True)
class FormConfig:
    shake_duration: float = 0.5


@dataclass(frozen=True)
class ParticleConfig:
    count: int = 30
    glow_radius: float = 400.0


@dataclass(frozen=True)
class ThemeConfig:
    storage_key: str = "theme"
    storage_path: str = "state/preferences.json"


@dataclass(frozen=True)
class MessagingConfig:
    """
    Message delivery collaborator settings (EmailJS).

    An empty service_id disables delivery: the form then reports every
    valid submission as failed.
    """
    endpoint: str = "https://api.emailjs.com/api/v1.0/email/send"
    service_id: str = ""
    template_id: str = ""
    public_key: str = ""
    to_name: str = ""
    timeout: float = 10.0

    @property
    def enabled(self) -> bool:
        return bool(self.service_id and self.template_id and self.public_key)


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True


@dataclass(frozen=True)
class EngineConfig:
    """Top-level engine configuration"""
    typewriter: TypewriterConfig = field(default_factory=TypewriterConfig)
    scroll: ScrollConfig = field(default_factory=ScrollConfig)
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    form: FormConfig = field(default_factory=FormConfig)
    particles: ParticleConfig = field(default_factory=ParticleConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    messaging: MessagingConfig = field(default_factory=MessagingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
