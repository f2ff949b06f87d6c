"""Hook documentation rendering."""

from hookflow.infrastructure.docs.hook_documenter import (
    DOC_FORMATS,
    HookDocumenter,
    group_views_by_plugin,
    hook_view,
)

__all__ = ["HookDocumenter", "DOC_FORMATS", "hook_view", "group_views_by_plugin"]
