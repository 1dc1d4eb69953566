"""
Error conversion helpers.

Low-level errors (pydantic, I/O) are translated into PadsmithError subclasses
at the service layer; the CLI only formats what reaches it:

```
CLI           -> format_error_for_display(e)
MappingStore  -> wrap_pydantic_error(e, path)
pydantic / OS -> ValidationError, OSError
```
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import PadsmithError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: ValidationError, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic ValidationError raised while loading a mapping file.

    JSON syntax problems become ConfigFileInvalidError; structurally valid
    JSON with the wrong shape becomes ConfigValidationError naming the
    dotted field path.

    Args:
        error: The pydantic ValidationError
        file_path: Path to the mapping file that failed to load

    Returns:
        A ConfigurationError with appropriate type and message
    """
    errors = error.errors()

    if any(err.get("type") == "json_invalid" for err in errors):
        first = next(err for err in errors if err.get("type") == "json_invalid")
        parse_error = first.get("ctx", {}).get("error", first.get("msg", str(error)))
        return ConfigFileInvalidError(file_path, str(parse_error))

    if len(errors) == 1:
        err = errors[0]
        field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
        return ConfigValidationError(
            field=field,
            value=err.get("input"),
            error_msg=err.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
        lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")
    logger.debug(f"{len(errors)} validation errors in {file_path}")

    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, PadsmithError):
        return error.user_message, error.recovery_hint

    if isinstance(error, OSError):
        target = f" ({error.filename})" if error.filename else ""
        return f"I/O error{target}: {error.strerror or error}", None

    return f"{type(error).__name__}: {error}", None
