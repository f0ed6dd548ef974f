from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from rsb.models.base_model import BaseModel
from rsb.models.config_dict import ConfigDict
from rsb.models.field import Field
from rsb.models.model_validator import model_validator


class JoinOptions(BaseModel):
    """
    Rendering options for ``MutableList.join_to`` and ``MutableList.join_to_string``.

    **Attributes:**

    *   `separator` (str): Written between two rendered elements. Defaults to ``", "``.
    *   `prefix` (str): Written once before the first element.
    *   `postfix` (str): Written once after everything else.
    *   `limit` (int): Maximum number of elements rendered; ``-1`` renders all of them.
    *   `truncated` (str): Written after the last rendered element when ``limit`` cut
        the output short. Defaults to ``"..."``.
    *   `transform` (Callable[[Any], str] | None): Renders one element. ``str`` is used
        when it is not set.

    Example:
        ```python
        options = JoinOptions(separator="; ", prefix="<", postfix=">", limit=2)
        list_of(1, 2, 3).join_to_string(options)  # "<1; 2; ...>"
        ```
    """

    separator: str = Field(default=", ")
    prefix: str = Field(default="")
    postfix: str = Field(default="")
    limit: int = Field(default=-1)
    truncated: str = Field(default="...")
    transform: Callable[[Any], str] | None = Field(default=None)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_limit(self) -> Self:
        if self.limit < -1:
            raise ValueError(
                f"limit must be -1 (unlimited) or a non-negative integer but found {self.limit}"
            )
        return self

    def render(self, element: Any) -> str:
        """Renders a single element with ``transform`` or ``str``."""
        if self.transform is not None:
            return self.transform(element)

        return str(element)
