# cssbuilder/cli.py
from __future__ import annotations

"""Command-line interface
------------------------
Build a selector from options, or render/validate/list selector definition
files. Thin wrapper around the builder and the definition loader.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import click

from cssbuilder.core.definition_loader import (
    DefinitionLoader,
    find_definition_files,
    load_definitions_file,
    render_document,
)
from cssbuilder.selectors import SelectorBuildError, SimpleSelector
from cssbuilder.utils.config import OutputFormat, get_settings
from cssbuilder.utils.logger import bind, get_logger, set_log_level, unbind


# -------- helpers --------


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _collect_files(targets: List[str], definitions_dir: Optional[str], recursive: bool) -> list[Path]:
    paths: list[Path] = []
    if targets:
        for p in (Path(t).resolve() for t in targets):
            if p.is_dir():
                paths.extend(find_definition_files(p, recursive=True))
            else:
                paths.append(p)
    elif definitions_dir:
        paths.extend(find_definition_files(Path(definitions_dir), recursive=recursive))
    return paths


_dir_option = click.option(
    "--dir", "definitions_dir",
    type=click.Path(file_okay=False, dir_okay=True, exists=True),
    default=None,
    help="Directory of selector definition YAML files",
)


# -------- CLI root --------


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL from settings",
)
@click.version_option(package_name="css-selector-builder")
def cli(log_level: Optional[str]):
    _ = get_settings()
    if log_level:
        set_log_level(log_level.upper())


# -------- commands --------


@cli.command("config")
def cmd_config():
    """Print effective configuration (after .env & env vars)."""
    s = get_settings()
    _echo_json(s.model_dump(mode="json"))


@cli.command("build")
@click.option("--element", default=None, help="Element (type) selector, e.g. div")
@click.option("--id", "id_", default=None, help="Id without the leading #")
@click.option("--class", "classes", multiple=True, help="Class name; repeatable")
@click.option("--attr", "attrs", multiple=True, help='Raw attribute expression, e.g. href$=".png"; repeatable')
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, e.g. focus; repeatable")
@click.option("--pseudo-element", default=None, help="Pseudo-element, e.g. before")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print fragments and text as JSON")
def cmd_build(
    element: Optional[str],
    id_: Optional[str],
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: Optional[str],
    as_json: bool,
):
    """
    Build one simple selector from fragments.

    Example:
      css-builder build --element a --attr 'href$=".png"' --pseudo-class focus
    """
    if not any([element, id_, classes, attrs, pseudo_classes, pseudo_element]):
        click.echo("Provide at least one fragment option (see --help).")
        sys.exit(2)

    sel = SimpleSelector()
    if element:
        sel.element(element)
    if id_:
        sel.id(id_)
    for c in classes:
        sel.class_(c)
    for a in attrs:
        sel.attr(a)
    for p in pseudo_classes:
        sel.pseudo_class(p)
    if pseudo_element:
        sel.pseudo_element(pseudo_element)

    if as_json:
        _echo_json({**sel.as_dict(), "text": sel.stringify()})
    else:
        click.echo(sel.stringify())


@cli.command("render")
@click.argument("targets", nargs=-1, required=False)
@_dir_option
@click.option("--recursive/--no-recursive", default=True, show_default=True)
@click.option(
    "--format", "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Override OUTPUT_FORMAT from settings",
)
@click.option("--json-out", type=click.Path(dir_okay=False), default=None, help="Write rendered selectors to this file")
def cmd_render(
    targets: List[str],
    definitions_dir: Optional[str],
    recursive: bool,
    output_format: Optional[str],
    json_out: Optional[str],
):
    """
    Render selector definitions to selector text.

    Examples:
      css-builder render selectors/nav.yaml
      css-builder render --dir selectors --format json
    """
    settings = get_settings()
    log = get_logger(__name__)
    fmt = OutputFormat(output_format) if output_format else settings.OUTPUT_FORMAT

    if not targets and not definitions_dir:
        definitions_dir = str(settings.SELECTORS_DIR) if settings.SELECTORS_DIR.is_dir() else None
    paths = _collect_files(targets, definitions_dir, recursive)
    if not paths:
        click.echo("Nothing to render. Provide file(s) or --dir.")
        sys.exit(2)

    rendered: list[dict] = []
    failures: list[dict] = []
    for fp in paths:
        bind(source=str(fp))
        try:
            for doc in load_definitions_file(fp):
                rendered.append(vars(render_document(doc, source=fp)))
        except (FileNotFoundError, ValueError) as e:
            # SelectorBuildError is a ValueError
            failures.append({"source": str(fp), "error": str(e), "error_type": type(e).__name__})
            log.error(f"failed to render {fp}: {e}")
        finally:
            unbind("source")

    if fmt == OutputFormat.json:
        _echo_json({"selectors": rendered, "errors": failures})
    else:
        for r in rendered:
            click.echo(f"{r['name']}: {r['text']}")
        for f in failures:
            click.echo(f"ERR {f['source']} -> {f['error_type']}: {f['error']}")

    if json_out:
        outp = Path(json_out).resolve()
        outp.parent.mkdir(parents=True, exist_ok=True)
        outp.write_text(json.dumps({"selectors": rendered, "errors": failures}, indent=2), encoding="utf-8")
        log.info(f"Wrote {len(rendered)} selector(s) to {outp}")

    sys.exit(0 if not failures else 1)


@cli.command("validate")
@click.argument("targets", nargs=-1, required=False)
@_dir_option
@click.option("--recursive/--no-recursive", default=True, show_default=True)
def cmd_validate(targets: List[str], definitions_dir: Optional[str], recursive: bool):
    """Validate definition files: schema, then a full build of every selector."""
    paths = _collect_files(targets, definitions_dir, recursive)
    if not paths:
        click.echo("Provide file(s) or --dir to validate.")
        sys.exit(2)

    ok = True
    for fp in paths:
        try:
            for doc in load_definitions_file(fp):
                render_document(doc, source=fp)
                click.echo(f"OK  {fp}  ->  {doc.name}")
        except SelectorBuildError as e:
            ok = False
            click.echo(f"ERR {fp}  ->  {type(e).__name__}: {e}")
        except (FileNotFoundError, ValueError) as e:
            ok = False
            click.echo(f"ERR {fp}  ->  {e}")

    sys.exit(0 if ok else 1)


@cli.command("list")
@_dir_option
@click.option("--recursive/--no-recursive", default=True, show_default=True)
@click.option("--tag", type=str, default=None, help="Only documents carrying this tag")
def cmd_list(definitions_dir: Optional[str], recursive: bool, tag: Optional[str]):
    """List selector documents available in a directory."""
    root = Path(definitions_dir) if definitions_dir else get_settings().SELECTORS_DIR
    if not root.is_dir():
        click.echo(f"No such directory: {root}")
        sys.exit(2)

    docs = DefinitionLoader().load_directory(root, recursive=recursive, tag=tag)
    if not docs:
        click.echo("No selector documents found.")
        return

    click.echo(f"Found {len(docs)} selector document(s):\n")
    for doc in docs:
        tags = f"  [{', '.join(doc.tags)}]" if doc.tags else ""
        click.echo(f" - {doc.name}{tags}")


def main() -> None:
    cli(prog_name="css-builder")


if __name__ == "__main__":
    main()
