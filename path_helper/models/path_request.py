"""
Path Request Models
===================
Pydantic models for the /paths HTTP endpoints.

Fields:
    path / from_path / to_path  — raw path strings in any separator convention
    separator                   — optional output separator (empty → default)
    strategy                    — relative-path diff: common_prefix / positional
    style                       — conversion target: windows / unix / os
    comparison                  — second path for ancestor/descendant checks
    component_aware             — compare whole segments instead of a string prefix
"""
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from path_helper.core.constants import RELATIVE_STRATEGIES


class AbsoluteRequest(BaseModel):
    path: str = ""
    separator: Optional[str] = None


class RelativeRequest(BaseModel):
    from_path: str = ""
    to_path: str = ""
    separator: Optional[str] = None
    strategy: Optional[str] = None

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        name = v.strip().lower()
        if name not in RELATIVE_STRATEGIES:
            raise ValueError(f"strategy must be one of {sorted(RELATIVE_STRATEGIES)}")
        return name


class NormalizeRequest(BaseModel):
    path: str = ""
    separator: Optional[str] = None


class ConvertRequest(BaseModel):
    path: str = ""
    style: Literal["windows", "unix", "os"] = "os"


class ClassifyRequest(BaseModel):
    path: str = ""
    comparison: Optional[str] = None
    component_aware: bool = False


class PathResponse(BaseModel):
    path: str


class ClassifyResponse(BaseModel):
    path: str
    is_absolute: bool
    is_relative: bool
    is_descendant: Optional[bool] = None
    is_ancestor: Optional[bool] = None
