from typing import Any, TypeAlias


# Type aliases for Python dictionaries
ResultEnvelope: TypeAlias = dict[str, Any]
ErrorEnvelope: TypeAlias = dict[str, str]

# Value carried by a successful result (short/long URL string or hit count)
ResultValue: TypeAlias = str | int | None
