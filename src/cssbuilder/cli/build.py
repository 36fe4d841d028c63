"""CLI command: cssbuilder build -- assemble and print a selector."""

from __future__ import annotations

import logging
import sys

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.selector import COMBINATORS, Selector, SelectorBuilder, SelectorError

log = logging.getLogger(__name__)

_KINDS = {
    "element": Selector.element,
    "id": Selector.id,
    "class": Selector.class_,
    "attr": Selector.attr,
    "pseudo-class": Selector.pseudo_class,
    "pseudo-element": Selector.pseudo_element,
}


class _UsageProblem(Exception):
    pass


def _assemble(tokens: tuple[str, ...], builder: SelectorBuilder) -> Selector:
    """Turn ``KIND=VALUE`` fragments and combinator tokens into one selector.

    Fragments are applied in the order given, so ordering mistakes surface as
    :class:`SelectorError`.  Combinators nest to the right, as in
    ``combine(a, "+", combine(b, "~", c))``.
    """
    compounds: list[Selector] = []
    combinators: list[str] = []
    current: Selector | None = None

    for token in tokens:
        if token in COMBINATORS:
            if current is None:
                raise _UsageProblem(f"Combinator {token!r} must follow a fragment")
            compounds.append(current)
            combinators.append(token)
            current = None
            continue

        kind, sep, value = token.partition("=")
        if not sep or kind not in _KINDS:
            raise _UsageProblem(
                f"Expected KIND=VALUE with KIND one of {', '.join(_KINDS)}: {token!r}"
            )
        if current is None:
            current = Selector()
        _KINDS[kind](current, value)

    if current is None:
        raise _UsageProblem("Selector must end with a fragment")
    compounds.append(current)

    result = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = builder.combine(left, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def build(tokens: tuple[str, ...], log_level: str) -> None:
    """Build a selector from KIND=VALUE fragments and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Combinators (' ', '+', '~', '>') start a new compound selector.

    Example: cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    config = BuilderConfig(strict_combinators=True, log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    builder = SelectorBuilder(config)

    try:
        selector = _assemble(tokens, builder)
    except _UsageProblem as exc:
        click.echo(f"Usage error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    log.debug("Built selector from %d token(s)", len(tokens))
    click.echo(selector.stringify())
