"""CollabMesh CLI — register and inspect mesh records from the command line."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from collabmesh import __version__, config
from collabmesh.core.result import Err, Result
from collabmesh.core.validation import CapacityError

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--data-dir", "-d", default=None, help="Directory holding the registry tables")
@click.option(
    "--as",
    "identity",
    default=None,
    help="Caller identity (defaults to $COLLABMESH_IDENTITY)",
)
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, identity: str | None):
    """CollabMesh — identity-scoped registry for a collaboration network.

    Organizations, contributors, and sponsors each keep exactly one record,
    keyed by their own identity.
    """
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir
    ctx.obj["identity"] = identity or config.DEFAULT_IDENTITY


# ── Helpers ──────────────────────────────────────────────────────────


def _mesh(ctx: click.Context):
    from collabmesh.mesh import Mesh

    return Mesh(ctx.obj.get("data_dir"))


def _caller(ctx: click.Context) -> str:
    identity = ctx.obj.get("identity")
    if not identity:
        raise click.UsageError("No caller identity. Pass --as IDENTITY or set COLLABMESH_IDENTITY.")
    return identity


def _fail(ctx: click.Context, result: Err) -> None:
    console.print(f"[red]{result.error.value}[/] ({result.error.code})")
    ctx.exit(1)


def _report(ctx: click.Context, result: Result) -> None:
    if isinstance(result, Err):
        _fail(ctx, result)
    console.print(f"[green]{result.value}[/]")


def _guard(ctx: click.Context, fn, *args):
    """Run a mutation, turning malformed field values into a usage failure."""
    try:
        return fn(*args)
    except (CapacityError, TypeError) as e:
        console.print(f"[red]Rejected:[/] {e}")
        ctx.exit(1)


def _load_payload(path: str | None) -> dict:
    """Load a YAML payload file. Keys use the stored field names."""
    if not path:
        return {}
    import yaml

    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must contain a mapping", param_hint="--from-file")
    return data


def _pick(explicit, payload: dict, key: str, default=""):
    if explicit:
        return explicit
    return payload.get(key, default)


def _payload_tokens(payload: dict, key: str) -> list:
    value = payload.get(key, [])
    if not isinstance(value, list):
        raise click.BadParameter(f"'{key}' must be a list", param_hint="--from-file")
    return value


def _show_record(title: str, rows: list[tuple[str, str]]) -> None:
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in rows:
        table.add_row(name, value)
    console.print(table)


def _show_exists(ctx: click.Context, result: Result, target: str) -> None:
    if isinstance(result, Err):
        _fail(ctx, result)
    console.print(f"[green]v[/] {target} is registered")


# ── Organizations ────────────────────────────────────────────────────


@main.group()
def org():
    """Manage your organization profile."""


def _org_options(fn):
    fn = click.option("--region", "-r", default="", help="Operating region")(fn)
    fn = click.option("--vertical", "-v", default="", help="Industry vertical tag")(fn)
    fn = click.option("--designation", "-n", default="", help="Organization name")(fn)
    return fn


@org.command(name="init")
@_org_options
@click.pass_context
def org_init(ctx: click.Context, designation: str, vertical: str, region: str):
    """Register an organization profile for the caller."""
    mesh = _mesh(ctx)
    result = _guard(ctx, mesh.initialize_organization, _caller(ctx), designation, vertical, region)
    _report(ctx, result)


@org.command(name="modify")
@_org_options
@click.pass_context
def org_modify(ctx: click.Context, designation: str, vertical: str, region: str):
    """Replace the caller's organization profile."""
    mesh = _mesh(ctx)
    result = _guard(ctx, mesh.modify_organization, _caller(ctx), designation, vertical, region)
    _report(ctx, result)


@org.command(name="terminate")
@click.pass_context
def org_terminate(ctx: click.Context):
    """Remove the caller's organization profile."""
    _report(ctx, _mesh(ctx).terminate_organization(_caller(ctx)))


@org.command(name="show")
@click.argument("identity")
@click.pass_context
def org_show(ctx: click.Context, identity: str):
    """Show the organization profile registered by IDENTITY."""
    result = _mesh(ctx).fetch_organization(identity)
    if isinstance(result, Err):
        _fail(ctx, result)
    r = result.value
    _show_record(
        f"Organization: {identity}",
        [("designation", r.designation), ("verticalTag", r.vertical_tag), ("region", r.region)],
    )


@org.command(name="exists")
@click.argument("identity")
@click.pass_context
def org_exists(ctx: click.Context, identity: str):
    """Check whether IDENTITY has an organization profile."""
    _show_exists(ctx, _mesh(ctx).validate_organization_node(identity), identity)


# ── Contributors ─────────────────────────────────────────────────────


@main.group()
def contributor():
    """Manage your contributor profile."""


def _contributor_options(fn):
    fn = click.option("--from-file", "-f", default=None, help="YAML payload file")(fn)
    fn = click.option("--narrative", default="", help="Free-form profile narrative")(fn)
    fn = click.option("--region", "-r", default="", help="Home region")(fn)
    fn = click.option("--competency", "-c", multiple=True, help="Competency (repeatable)")(fn)
    fn = click.option("--tag", "-t", default="", help="Public identifier tag")(fn)
    return fn


def _contributor_args(tag, competency, region, narrative, from_file) -> tuple:
    payload = _load_payload(from_file)
    return (
        _pick(tag, payload, "identifierTag"),
        list(competency) or _payload_tokens(payload, "competencies"),
        _pick(region, payload, "region"),
        _pick(narrative, payload, "narrative"),
    )


@contributor.command(name="establish")
@_contributor_options
@click.pass_context
def contributor_establish(ctx, tag, competency, region, narrative, from_file):
    """Register a contributor profile for the caller."""
    mesh = _mesh(ctx)
    args = _contributor_args(tag, competency, region, narrative, from_file)
    _report(ctx, _guard(ctx, mesh.establish_contributor, _caller(ctx), *args))


@contributor.command(name="update")
@_contributor_options
@click.pass_context
def contributor_update(ctx, tag, competency, region, narrative, from_file):
    """Replace the caller's contributor profile."""
    mesh = _mesh(ctx)
    args = _contributor_args(tag, competency, region, narrative, from_file)
    _report(ctx, _guard(ctx, mesh.update_contributor, _caller(ctx), *args))


@contributor.command(name="deactivate")
@click.pass_context
def contributor_deactivate(ctx: click.Context):
    """Remove the caller's contributor profile."""
    _report(ctx, _mesh(ctx).deactivate_contributor(_caller(ctx)))


@contributor.command(name="show")
@click.argument("identity")
@click.pass_context
def contributor_show(ctx: click.Context, identity: str):
    """Show the contributor profile registered by IDENTITY."""
    result = _mesh(ctx).fetch_contributor(identity)
    if isinstance(result, Err):
        _fail(ctx, result)
    r = result.value
    _show_record(
        f"Contributor: {identity}",
        [
            ("identifierTag", r.identifier_tag),
            ("competencies", ", ".join(r.competencies)),
            ("region", r.region),
            ("narrative", r.narrative),
        ],
    )


@contributor.command(name="exists")
@click.argument("identity")
@click.pass_context
def contributor_exists(ctx: click.Context, identity: str):
    """Check whether IDENTITY has a contributor profile."""
    _show_exists(ctx, _mesh(ctx).validate_contributor_node(identity), identity)


# ── Requisitions ─────────────────────────────────────────────────────


@main.group()
def requisition():
    """Manage your published requisition."""


def _requisition_options(fn):
    fn = click.option("--from-file", "-f", default=None, help="YAML payload file")(fn)
    fn = click.option("--competency", "-c", multiple=True, help="Required competency (repeatable)")(fn)
    fn = click.option("--territory", default="", help="Territory the role covers")(fn)
    fn = click.option("--summary", "-s", default="", help="Specification summary")(fn)
    fn = click.option("--role", default="", help="Role designation")(fn)
    return fn


def _requisition_args(role, summary, territory, competency, from_file) -> tuple:
    payload = _load_payload(from_file)
    return (
        _pick(role, payload, "roleDesignation"),
        _pick(summary, payload, "specificationSummary"),
        _pick(territory, payload, "territory"),
        list(competency) or _payload_tokens(payload, "requiredCompetencies"),
    )


@requisition.command(name="publish")
@_requisition_options
@click.pass_context
def requisition_publish(ctx, role, summary, territory, competency, from_file):
    """Publish a requisition as the caller."""
    mesh = _mesh(ctx)
    args = _requisition_args(role, summary, territory, competency, from_file)
    _report(ctx, _guard(ctx, mesh.publish_requisition, _caller(ctx), *args))


@requisition.command(name="adjust")
@_requisition_options
@click.pass_context
def requisition_adjust(ctx, role, summary, territory, competency, from_file):
    """Replace the caller's requisition."""
    mesh = _mesh(ctx)
    args = _requisition_args(role, summary, territory, competency, from_file)
    _report(ctx, _guard(ctx, mesh.adjust_requisition, _caller(ctx), *args))


@requisition.command(name="withdraw")
@click.pass_context
def requisition_withdraw(ctx: click.Context):
    """Withdraw the caller's requisition."""
    _report(ctx, _mesh(ctx).withdraw_requisition(_caller(ctx)))


@requisition.command(name="show")
@click.argument("identity")
@click.pass_context
def requisition_show(ctx: click.Context, identity: str):
    """Show the requisition published by IDENTITY."""
    result = _mesh(ctx).fetch_requisition(identity)
    if isinstance(result, Err):
        _fail(ctx, result)
    r = result.value
    _show_record(
        f"Requisition: {identity}",
        [
            ("roleDesignation", r.role_designation),
            ("specificationSummary", r.specification_summary),
            ("sponsorIdentity", r.sponsor_identity),
            ("territory", r.territory),
            ("requiredCompetencies", ", ".join(r.required_competencies)),
        ],
    )


@requisition.command(name="exists")
@click.argument("identity")
@click.pass_context
def requisition_exists(ctx: click.Context, identity: str):
    """Check whether IDENTITY has a published requisition."""
    _show_exists(ctx, _mesh(ctx).validate_requisition_entry(identity), identity)


# ── Diagnostics ──────────────────────────────────────────────────────


@main.group(name="diagnostics")
def diagnostics_group():
    """Mesh-wide diagnostics."""


@diagnostics_group.command()
@click.pass_context
def integrity(ctx: click.Context):
    """Verify mesh integrity."""
    _report(ctx, _mesh(ctx).verify_mesh_integrity())


@diagnostics_group.command()
@click.pass_context
def analytics(ctx: click.Context):
    """Generate mesh analytics."""
    _report(ctx, _mesh(ctx).generate_mesh_analytics())


# ── Audit ────────────────────────────────────────────────────────────


@main.command()
@click.option("--actor", default=None, help="Only events by this identity")
@click.option(
    "--registry",
    default=None,
    type=click.Choice(["organization", "contributor", "requisition"]),
    help="Only events for this registry",
)
@click.option("--limit", "-n", default=50, help="Maximum number of events")
@click.pass_context
def audit(ctx: click.Context, actor: str | None, registry: str | None, limit: int):
    """List committed mutations, newest first."""
    entries = _mesh(ctx).audit.get_events(actor=actor, registry=registry, limit=limit)

    if not entries:
        console.print("[yellow]No audit events recorded.[/]")
        return

    table = Table(title=f"Audit Log ({len(entries)} events)")
    table.add_column("Timestamp", style="dim")
    table.add_column("Actor", style="cyan")
    table.add_column("Action", no_wrap=True)
    table.add_column("Registry")

    for e in entries:
        table.add_row(e.timestamp, e.actor, e.action, e.registry)

    console.print(table)


if __name__ == "__main__":
    main()
