from typing import Any
from collections.abc import Callable


# Milliseconds since the UNIX epoch
type Clock = Callable[[], int]

# Type aliases for Python dictionaries
type AppConfigDocument = dict[str, Any]
type ComponentConfig = dict[str, Any]
