"""Load and render Jinja2 templates from a caller's templates subpackage."""

import importlib.resources

import jinja2
from markupsafe import escape


def _php_string_filter(value) -> str:
    """Escape ``value`` for a PHP single-quoted string literal."""
    return str(value).replace("\\", "\\\\").replace("'", "\\'")


def _doc_comment_filter(value) -> str:
    """Keep ``value`` from closing a ``/* ... */`` comment."""
    return str(value).replace("*/", "* /")


def _twig_comment_filter(value) -> str:
    """Keep ``value`` from closing a ``{# ... #}`` Twig comment."""
    return str(value).replace("#}", "# }")


def _twig_text_filter(value) -> str:
    """HTML-escape ``value`` and entity-encode braces so Twig leaves it as text."""
    return str(escape(str(value))).replace("{", "&#123;").replace("}", "&#125;")


_ENVIRONMENT = jinja2.Environment(
    keep_trailing_newline=True,
    trim_blocks=True,
    undefined=jinja2.StrictUndefined,
)
_ENVIRONMENT.filters["php_string"] = _php_string_filter
_ENVIRONMENT.filters["doc_comment"] = _doc_comment_filter
_ENVIRONMENT.filters["twig_comment"] = _twig_comment_filter
_ENVIRONMENT.filters["twig_text"] = _twig_text_filter


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "block.json.j2")
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` subpackage beneath it.
        **kwargs: Template variables.

    Besides the Jinja2 builtins, templates can use the ``php_string``,
    ``doc_comment``, ``twig_comment`` and ``twig_text`` escaping filters.

    Returns:
        The rendered template string, trailing newline preserved.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return _ENVIRONMENT.from_string(source).render(**kwargs)
