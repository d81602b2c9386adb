from collections.abc import Callable
from datetime import datetime
from typing import Any
from uuid import UUID


# Type aliases for handler payloads
type Request = dict[str, Any]
type Response = dict[str, Any]

# Type aliases for domain values
type Slug = str
type OwnerId = UUID
type Clock = Callable[[], datetime]
type SlugFactory = Callable[[], str]
type Opener = Callable[[str], Any]
