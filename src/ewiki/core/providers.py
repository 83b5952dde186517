"""Page setting providers.

Title decorations, icons and custom assets can be configured either as a
fixed value or as a function of the rendered file. Both forms are wrapped in
a provider and resolved the same way for every request.
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

ProviderFunc = Callable[[Path], Any | Awaitable[Any]]


def to_string_safe(value: object) -> str:
    """Convert any value to a string, mapping None to an empty string.

    Exceptions are rendered as "[ExceptionName] 'message'".
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, BaseException):
        return f"[{type(value).__name__}] '{value}'"
    return str(value)


@dataclass(frozen=True)
class Literal:
    """Provider returning the same value for every file."""

    value: object

    async def resolve(self, file: Path) -> object:
        return self.value


@dataclass(frozen=True)
class Computed:
    """Provider calling a function, sync or async, with the file path."""

    func: ProviderFunc

    async def resolve(self, file: Path) -> object:
        result = self.func(file)
        if inspect.isawaitable(result):
            result = await result
        return result


Provider = Literal | Computed


def as_provider(value: object, default: object = None) -> Provider | None:
    """Wrap a configured value into a provider.

    Args:
        value: Literal value, callable, or existing provider
        default: Value used when value is empty

    Returns:
        Provider, or None when neither value nor default is set
    """
    if isinstance(value, Literal | Computed):
        return value
    if callable(value):
        return Computed(value)
    if not value:
        return Literal(default) if default is not None else None
    return Literal(to_string_safe(value))


async def resolve_text(provider: Provider | None, file: Path) -> str:
    """Resolve a provider for file as a trimmed string."""
    if provider is None:
        return ""
    return to_string_safe(await provider.resolve(file)).strip()


def default_sub_title(source_dir: Path, file: Path) -> str:
    """Subtitle derived from the file path relative to the wiki root."""
    return file.relative_to(source_dir).with_suffix("").as_posix()
