"""Jinja2 documentation renderer for registered hooks.

Renders hook listings as Markdown or standalone HTML, optionally grouped
by owning plugin.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, TemplateSyntaxError, UndefinedError

from hookflow.core.hooks.hook_definition import HookDefinition
from hookflow.core.logging import get_logger
from hookflow.domain.services.hook_validation_service import class_reference

logger = get_logger(__name__)

DOC_FORMATS = ("markdown", "html")

MARKDOWN_TEMPLATE = """\
{% macro render_hook(hook) %}
## {{ hook.identifier }}

**Plugin:** {{ hook.plugin }}

**Description:** {{ hook.description }}

**Type:** {{ hook.kind }}

**Priority:** {{ hook.priority }}

**Trigger Point:** {{ hook.trigger_point }}

{% if hook.parameters %}
### Parameters

{% for name, type_tag in hook.parameters %}
- `{{ name }}`: {{ type_tag }}
{% endfor %}

{% endif %}
### Class Reference

```python
{{ hook.class_name }}
```

---

{% endmacro %}
# Hook Documentation

{% if grouped %}
{% for plugin, plugin_hooks in groups %}
## {{ plugin }}

{% for hook in plugin_hooks %}{{ render_hook(hook) }}{% endfor %}
{% endfor %}
{% else %}
{% for hook in hooks %}{{ render_hook(hook) }}{% endfor %}
{% endif %}
"""

HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<title>Hook Documentation</title>
<style>
body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
h1 { color: #333; }
h2 { color: #666; margin-top: 30px; }
code { background: #f5f5f5; padding: 2px 5px; border-radius: 3px; }
hr { margin: 30px 0; border: none; border-top: 1px solid #eee; }
</style>
</head>
<body>
<h1>Hook Documentation</h1>
{% macro render_hook(hook) %}
<h2>{{ hook.identifier }}</h2>
<p><strong>Plugin:</strong> {{ hook.plugin }}</p>
<p><strong>Description:</strong> {{ hook.description }}</p>
<p><strong>Type:</strong> {{ hook.kind }}</p>
<p><strong>Priority:</strong> {{ hook.priority }}</p>
<p><strong>Trigger Point:</strong> {{ hook.trigger_point }}</p>
{% if hook.parameters %}
<h3>Parameters</h3>
<ul>
{% for name, type_tag in hook.parameters %}
<li><code>{{ name }}</code>: {{ type_tag }}</li>
{% endfor %}
</ul>
{% endif %}
<h3>Class Reference</h3>
<pre><code>{{ hook.class_name }}</code></pre>
<hr>
{% endmacro %}
{% if grouped %}
{% for plugin, plugin_hooks in groups %}
<h2>{{ plugin }}</h2>
{% for hook in plugin_hooks %}{{ render_hook(hook) }}{% endfor %}
{% endfor %}
{% else %}
{% for hook in hooks %}{{ render_hook(hook) }}{% endfor %}
{% endif %}
</body>
</html>
"""


def hook_view(hook: HookDefinition) -> dict[str, Any]:
    """Flatten a hook into the fields shown in documentation and listings."""
    return {
        "identifier": hook.identifier,
        "description": hook.description,
        "plugin": hook.plugin,
        "kind": "Filter" if hook.is_filter else "Action",
        "priority": hook.priority,
        "trigger_point": hook.trigger_point,
        "parameters": list(hook.parameters.items()),
        "class_name": class_reference(hook),
    }


def group_views_by_plugin(views: Iterable[dict[str, Any]]) -> list[tuple[str, list[dict[str, Any]]]]:
    """Group hook views by plugin, keeping first-seen plugin order."""
    groups: dict[str, list[dict[str, Any]]] = {}
    for view in views:
        groups.setdefault(view["plugin"], []).append(view)
    return list(groups.items())


class HookDocumenter:
    """Renders hook documentation with Jinja2 templates.

    Markdown is rendered verbatim; HTML output is autoescaped.
    """

    def __init__(self) -> None:
        """Initialize one template environment per output format."""
        self._environments = {
            "markdown": Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True),
            "html": Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True),
        }
        self._templates = {
            "markdown": MARKDOWN_TEMPLATE,
            "html": HTML_TEMPLATE,
        }

    def render(
        self,
        hooks: Iterable[HookDefinition],
        fmt: str = "markdown",
        group_by_plugin: bool = False,
    ) -> str:
        """Render documentation for hooks.

        Args:
            hooks: The hooks to document.
            fmt: "markdown" or "html".
            group_by_plugin: Group hooks under one heading per plugin.

        Returns:
            Rendered documentation.

        Raises:
            ValueError: If the format is not supported.
        """
        if fmt not in DOC_FORMATS:
            raise ValueError(f"Unsupported documentation format '{fmt}'")

        views = [hook_view(hook) for hook in hooks]

        try:
            template = self._environments[fmt].from_string(self._templates[fmt])
            rendered = template.render(
                hooks=views,
                groups=group_views_by_plugin(views),
                grouped=group_by_plugin,
            )
        except (TemplateSyntaxError, UndefinedError) as e:
            logger.error("Documentation rendering failed", format=fmt, error=str(e))
            raise

        logger.debug("Documentation rendered", format=fmt, hook_count=len(views))
        return rendered

    def write(
        self,
        hooks: Iterable[HookDefinition],
        output: str | Path,
        fmt: str = "markdown",
        group_by_plugin: bool = False,
    ) -> Path:
        """Render documentation and save it to a file.

        Parent directories are created as needed.

        Returns:
            The path written.
        """
        output = Path(output)
        documentation = self.render(hooks, fmt=fmt, group_by_plugin=group_by_plugin)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(documentation, encoding="utf-8")
        logger.info("Documentation saved", path=str(output), format=fmt)
        return output
