"""The analytics core package.

Hosts wire the package up at startup in two calls:

```python
from analytics_core.logging import setup_logging_from_settings
from analytics_core.services.di import register_all_services
from analytics_core.services.registry import get_service_registry

setup_logging_from_settings()
register_all_services(get_service_registry())
```

After that, plugins are loaded through ``PluginManager`` and application code
talks to the services directly or through ``analytics_core.functions``.
"""

from .settings import Settings, get_settings  # noqa: F401

__all__ = ["get_settings", "Settings"]
