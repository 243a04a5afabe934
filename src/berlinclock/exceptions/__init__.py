"""
Exceptions raised by berlinclock.

```
BerlinClockError
├── TimeInputError (kind: TimeErrorKind)
│   ├── EmptyTimeError
│   └── InvalidTimeFormatError
└── ConfigError
```

### Example: Branching on the kind of bad input

```python
from berlinclock import compute
from berlinclock.exceptions import TimeErrorKind, TimeInputError

try:
    lamps = compute(text)
except TimeInputError as e:
    if e.kind is TimeErrorKind.EMPTY_INPUT:
        ask_again()
    else:
        reject(e.user_message)
```
"""

from .base import BerlinClockError
from .config import ConfigError
from .time_input import (
    EMPTY_TIME_MESSAGE,
    INVALID_TIME_MESSAGE,
    EmptyTimeError,
    InvalidTimeFormatError,
    TimeErrorKind,
    TimeInputError,
)

__all__ = [
    "BerlinClockError",
    "ConfigError",
    "EMPTY_TIME_MESSAGE",
    "INVALID_TIME_MESSAGE",
    "EmptyTimeError",
    "InvalidTimeFormatError",
    "TimeErrorKind",
    "TimeInputError",
]
