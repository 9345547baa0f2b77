"""Jinja2 environment for widget markup."""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape


def toggle_id(instance_id: str, entry_id: int, position: int) -> str:
    return f"{instance_id}-faq-btn-{entry_id}-{position}"


def panel_id(instance_id: str, entry_id: int, position: int) -> str:
    return f"{instance_id}-faq-panel-{entry_id}-{position}"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Shared template environment (autoescaping HTML)."""
    env = Environment(
        loader=PackageLoader("app", "templates"),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=False,
    )
    env.globals.update(toggle_id=toggle_id, panel_id=panel_id)
    return env
