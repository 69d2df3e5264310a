"""Core type definitions."""

from collections.abc import Mapping, Sequence
from typing import NewType

# Canonical URL path (e.g., "/", "/child/:id"), host-relative
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

# One binding record: parameter name -> single value or ordered values
ParamRecord = Mapping[str, str | int | Sequence[str | int]]

# Binding table: path containing dynamic segments -> binding records
ParamsConfig = Mapping[str, Sequence[ParamRecord]]
