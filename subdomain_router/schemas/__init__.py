"""Schema definitions for routing decisions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RoutingActionKind(str, Enum):
    """What the middleware does with a request."""
    CONTINUE = "continue"
    REWRITE = "rewrite"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class RoutingAction:
    """Routing decision for a single request.

    ``path`` is the internal rewrite target or the redirect location; it is
    None for CONTINUE.
    """
    kind: RoutingActionKind
    path: Optional[str] = None

    def __post_init__(self):
        if self.kind == RoutingActionKind.CONTINUE:
            if self.path is not None:
                raise ValueError("CONTINUE actions do not carry a path")
        elif not self.path or not self.path.startswith("/"):
            raise ValueError(f"{self.kind.value} target must be an absolute path, got {self.path!r}")

    @classmethod
    def proceed(cls) -> "RoutingAction":
        return cls(RoutingActionKind.CONTINUE)

    @classmethod
    def rewrite_to(cls, path: str) -> "RoutingAction":
        return cls(RoutingActionKind.REWRITE, path)

    @classmethod
    def redirect_to(cls, path: str) -> "RoutingAction":
        return cls(RoutingActionKind.REDIRECT, path)

    def to_dict(self) -> dict:
        return {"action": self.kind.value, "path": self.path}


CONTINUE = RoutingAction.proceed()

__all__ = ["RoutingActionKind", "RoutingAction", "CONTINUE"]
