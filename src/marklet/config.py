"""ContextVar-based render configuration for marklet.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown call and read by the renderer.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from marklet.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(close_lists_at_end=False)):
        html = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        close_lists_at_end: Close a list that is still open after the last
            token. When False, the output ends inside the open <ul>/<ol>.
            This matches the legacy renderer only for documents without a
            trailing newline; there, the final empty line closed the list.

    """

    close_lists_at_end: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> RenderConfig.from_dict({"close_lists_at_end": False, "x": 1})
            RenderConfig(close_lists_at_end=False)

        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (context-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(close_lists_at_end=False)):
        ...     html = Parser("- a").parse()
        >>> html
        '<ul><li>a</li>\\n'

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
