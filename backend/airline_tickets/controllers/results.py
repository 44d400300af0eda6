from dataclasses import dataclass, field
from typing import Any, Optional

from fastapi import status


@dataclass
class ActionResult:
    """Status code plus body, independent of the HTTP framework.

    ``action_name``/``route_values`` name the route a created resource can be
    fetched from; the API layer turns them into a Location header.
    """

    status_code: int
    value: Any = None
    action_name: Optional[str] = None
    route_values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, value: Any) -> "ActionResult":
        return cls(status.HTTP_200_OK, value)

    @classmethod
    def created_at_action(cls, action_name: str, route_values: dict[str, Any], value: Any) -> "ActionResult":
        return cls(status.HTTP_201_CREATED, value, action_name, dict(route_values))

    @classmethod
    def bad_request(cls, value: Any) -> "ActionResult":
        return cls(status.HTTP_400_BAD_REQUEST, value)

    @classmethod
    def not_found(cls, value: Any = None) -> "ActionResult":
        return cls(status.HTTP_404_NOT_FOUND, value)

    @classmethod
    def server_error(cls, message: str) -> "ActionResult":
        return cls(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
