"""HTTP server command."""

import click
import uvicorn

from ledgerreport.web.app import create_app


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", type=int, default=4000, show_default=True, envvar="PORT", help="Port to listen on")
@click.pass_context
def serve(ctx, host: str, port: int):
    """Serve the report endpoints over HTTP."""
    app = create_app(settings=ctx.obj["settings"], db=ctx.obj["db"])
    click.echo(f"Serving ledgerreport on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=ctx.obj["settings"].log_level.lower())


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
