"""
Custom exception hierarchy for padsmith.

```
PadsmithError (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   ├── ConfigValidationError
│   └── UnknownDeviceFamilyError
├── MappingError
│   ├── LayerCountError
│   ├── StructureMismatchError
│   ├── CapacityExceededError
│   ├── DelayTooLongError
│   ├── UnsupportedFeatureError
│   └── KeyGrammarError
│       ├── UnknownKeyError
│       └── InvalidChordError
└── TransportError
```

File system failures are not wrapped: ``OSError`` propagates unchanged.

### Example: locating a bad key

```python
from padsmith.exceptions import MappingError

try:
    MappingStore().validate(path, product_id=0x8890)
except MappingError as e:
    print(e)          # layer 1 knob 1 cw: unsupported media key for 0x8890
    print(e.context)  # ['layer 1', 'knob 1 cw']
```
"""

from .base import PadsmithError, TransportError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    UnknownDeviceFamilyError,
)
from .handlers import format_error_for_display, wrap_pydantic_error
from .mapping import (
    CapacityExceededError,
    DelayTooLongError,
    InvalidChordError,
    KeyGrammarError,
    LayerCountError,
    MappingError,
    StructureMismatchError,
    UnknownKeyError,
    UnsupportedFeatureError,
)

__all__ = [
    # Base
    "PadsmithError",
    "TransportError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "UnknownDeviceFamilyError",
    # Mapping
    "CapacityExceededError",
    "DelayTooLongError",
    "InvalidChordError",
    "KeyGrammarError",
    "LayerCountError",
    "MappingError",
    "StructureMismatchError",
    "UnknownKeyError",
    "UnsupportedFeatureError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
