from .form_controller import FormController, validate_field, validate_fields
from .scroll_tracker import ScrollTracker
from .pointer_tracker import PointerTracker
from .navigation_controller import NavigationController
from .page_controller import PageController

__all__ = [
    'FormController',
    'validate_field',
    'validate_fields',
    'ScrollTracker',
    'PointerTracker',
    'NavigationController',
    'PageController',
]
