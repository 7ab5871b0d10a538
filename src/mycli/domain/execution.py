"""Record describing a single command invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass(slots=True, frozen=True)
class CommandExecution:
    """Snapshot of a command run handed to the execution logger exactly once.

    Attributes
    ----------
    command:
        Name of the subcommand (for example ``"greet"``).
    arguments:
        Positional arguments passed after the subcommand, in order.
    flags:
        Flag names mapped to their rendered string values.
    output:
        Text the command printed, empty when it failed before printing.
    error:
        Exception that ended the invocation, ``None`` on success.
    """

    command: str
    arguments: tuple[str, ...] = ()
    flags: Mapping[str, str] = field(default_factory=dict)
    output: str = ""
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("command must not be empty")
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "flags", dict(self.flags))

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_extra(self) -> dict[str, Any]:
        """Return the structured fields attached to the execution log event.

        Examples
        --------
        >>> record = CommandExecution("greet", ["x"], {"name": "Ada"}, "hi")
        >>> sorted(record.to_extra())
        ['arguments', 'command', 'flags', 'output']
        >>> CommandExecution("greet", error=ValueError("bad")).to_extra()["error"]
        'bad'
        """
        extra: dict[str, Any] = {
            "command": self.command,
            "arguments": list(self.arguments),
            "flags": dict(self.flags),
            "output": self.output,
        }
        if self.error is not None:
            extra["error"] = str(self.error)
        return extra


def render_flags(values: Mapping[str, Any]) -> dict[str, str]:
    """Render flag values as strings, booleans in lowercase.

    Examples
    --------
    >>> render_flags({"name": "Ada", "shout": True})
    {'name': 'Ada', 'shout': 'true'}
    """
    rendered: dict[str, str] = {}
    for key, value in values.items():
        if isinstance(value, bool):
            rendered[key] = "true" if value else "false"
        else:
            rendered[key] = "" if value is None else str(value)
    return rendered


def as_arguments(values: Sequence[str]) -> tuple[str, ...]:
    return tuple(str(value) for value in values)


__all__ = ["CommandExecution", "as_arguments", "render_flags"]
