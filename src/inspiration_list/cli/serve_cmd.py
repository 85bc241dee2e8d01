"""Run the API server"""

import click


@click.command()
@click.option('--host', default='127.0.0.1', show_default=True, help='Bind address')
@click.option('--port', default=8787, show_default=True, type=int, help='Bind port')
@click.option('--reload', is_flag=True, help='Restart on code changes (development)')
def serve(host: str, port: int, reload: bool):
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    from inspiration_list.config import settings

    uvicorn.run(
        "inspiration_list.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
