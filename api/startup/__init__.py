"""Startup modules for component initialization.

- ComponentFactory: creates the content and related-documents services
- ConfigValidator: checks the content directory before serving
- StartupManager: wires services onto AppState and runs validation
"""

from .component_factory import ComponentFactory
from .config_validator import ConfigValidator, ConfigValidationError
from .manager import StartupManager

__all__ = [
    'ComponentFactory',
    'ConfigValidator',
    'ConfigValidationError',
    'StartupManager',
]
