"""Type aliases needed in the package."""

from decimal import Decimal
from typing import TypeAlias

from .version import Version

OrderingKey: TypeAlias = Decimal
VersionLike: TypeAlias = str | Version
ComponentCount: TypeAlias = int
