"""Template rendering engine."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    pass_context,
)
from jinja2.ext import Extension
from jinja2.lexer import TOKEN_BLOCK_BEGIN, TOKEN_NAME, Token, TokenStream
from jinja2.runtime import Context

from ..core.errors import (
    BuildError,
    CircularPartialError,
    DirectiveSyntaxError,
    RenderError,
    SourceReadError,
    UnresolvedPartialError,
)
from ..core.models import RenderContext, SourceEntry, freeze_context
from ..settings import BuildSettings

logger = logging.getLogger(__name__)

PARTIAL_DIRECTIVE = "partial"

# Tags that would share the caller's whole context with another file
SHARED_CONTEXT_TAGS = frozenset({"include", "import", "from", "extends"})


class PartialOnlyExtension(Extension):
    """Reject Jinja tags that load other templates outside of ``partial()``."""

    def filter_stream(self, stream: TokenStream) -> Iterator[Token]:
        previous: Token | None = None
        for token in stream:
            if (
                previous is not None
                and previous.type == TOKEN_BLOCK_BEGIN
                and token.type == TOKEN_NAME
                and token.value in SHARED_CONTEXT_TAGS
            ):
                raise TemplateSyntaxError(
                    f"{{% {token.value} %}} is not supported, use "
                    f"{PARTIAL_DIRECTIVE}(name, **flags) instead",
                    token.lineno,
                    stream.name,
                    stream.filename,
                )
            previous = token
            yield token


def create_environment(
    settings: BuildSettings, partials: Mapping[str, SourceEntry]
) -> Environment:
    """Create the Jinja2 environment used for one build.

    The environment exposes a single directive, ``partial(name, **flags)``,
    which renders the partial registered under ``name`` with ``flags`` as its
    only context and splices the result in place.

    Args:
        settings: Build settings (source root, naming conventions)
        partials: Discovered partials keyed by logical name

    Returns:
        Configured Jinja2 environment
    """
    loader = FileSystemLoader(str(settings.source_dir))
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        extensions=[PartialOnlyExtension],
    )

    # Names of the partials currently being rendered, outermost first
    active: list[str] = []

    @pass_context
    def partial(ctx: Context, name: Any = None, /, *extra: Any, **flags: Any) -> str:
        including = str(settings.source_dir / ctx.name) if ctx.name else None

        if not isinstance(name, str) or not name.strip():
            raise DirectiveSyntaxError(
                including, f"{PARTIAL_DIRECTIVE}() needs a partial name, got {name!r}"
            )
        if extra:
            raise DirectiveSyntaxError(
                including,
                f"{PARTIAL_DIRECTIVE}({name!r}) takes flags as keyword arguments only",
            )
        if PARTIAL_DIRECTIVE in flags:
            raise DirectiveSyntaxError(
                including, f"flag name {PARTIAL_DIRECTIVE!r} is reserved"
            )

        entry = partials.get(name)
        if entry is None:
            expected = settings.source_dir / settings.partial_filename(name)
            raise UnresolvedPartialError(including, name, expected)
        if entry.name in active:
            raise CircularPartialError(including, [*active, entry.name])

        logger.debug(f"  - Including partial: {entry.path} {flags or ''}")
        active.append(entry.name)
        try:
            text = render(env, entry, flags)
        finally:
            active.pop()

        return text.strip() if settings.strip_partials else text

    env.globals[PARTIAL_DIRECTIVE] = partial
    return env


def render(
    env: Environment, entry: SourceEntry, context: RenderContext | None = None
) -> str:
    """Render a template or partial document.

    Args:
        env: Environment returned by ``create_environment``
        entry: Entry to render; must live directly under the source root
        context: Named flags visible to this render only

    Returns:
        Fully resolved text
    """
    frozen = freeze_context(context)

    try:
        template = env.get_template(entry.path.name)
        return template.render(**frozen)
    except BuildError:
        raise
    except TemplateSyntaxError as exc:
        raise DirectiveSyntaxError(
            exc.filename or str(entry.path), exc.message or str(exc), exc.lineno
        ) from exc
    except TemplateNotFound as exc:
        raise SourceReadError(entry.path, "file disappeared during the build") from exc
    except UnicodeDecodeError as exc:
        raise SourceReadError(entry.path, "not valid UTF-8") from exc
    except OSError as exc:
        raise SourceReadError(entry.path, exc.strerror or str(exc)) from exc
    except TemplateError as exc:
        raise RenderError(str(entry.path), exc.message or str(exc)) from exc
