"""Web server command."""

import click

from .base import CliContext


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.pass_obj
def serve(obj: CliContext, host: str, port: int):
    """Start the JSON API server.

    The server uses the store built for this invocation (demo data or --data).

    Examples:

        # Start on default port (8000)
        gym-helper serve

        # Expose to network (all interfaces)
        gym-helper serve --host 0.0.0.0 --port 3000
    """
    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting gym-helper API server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    app = create_app(store=obj.store, settings=obj.settings)

    uvicorn.run(app, host=host, port=port)
