"""CLI entry point for posts-proxy."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from core.config import CONFIG_FILE, Config, load_config
from core.exceptions import ConfigurationError
from ui.dashboard import Dashboard
from ui.log_utils import clear_logs, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    config = load_config()

    # Handle CLI arguments
    args = sys.argv[1:]
    if args:
        arg = args[0]

        if arg == "--config":
            console.print(f"[bold]Config:[/bold] {CONFIG_FILE}")
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        if arg == "--port":
            try:
                config = _with_port(config, args[1:])
            except ConfigurationError as e:
                console.print(f"[red][ERROR][/red] {e}")
                sys.exit(2)

    clear_logs()
    dashboard = Dashboard(config)

    import uvicorn

    app = create_app(config, dashboard)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.proxy.host,
        port=config.proxy.port,
        log_level="warning",
        timeout_keep_alive=config.limits.keep_alive_timeout,
    )
    server = uvicorn.Server(uvicorn_config)

    dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "starting http server", port=config.proxy.port)
    try:
        server.run()
    except SystemExit:
        # uvicorn exits when it cannot bind
        dashboard.stop()
        write_cli_log("FATAL", "Could not start http server", port=config.proxy.port)
        console.print(f"[red][FATAL][/red] Could not start http server on port {config.proxy.port}")
        raise
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Proxy stopped", duration=str(duration))
        dashboard.stop()


def _with_port(config: Config, values: list[str]) -> Config:
    """Return a copy of ``config`` listening on the given port."""
    if not values:
        raise ConfigurationError("--port requires a value")
    try:
        port = int(values[0])
    except ValueError:
        raise ConfigurationError(f"Invalid port: {values[0]}") from None
    if not 0 < port < 65536:
        raise ConfigurationError(f"Port out of range: {port}")
    proxy = config.proxy.model_copy(update={"port": port})
    return config.model_copy(update={"proxy": proxy})


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]Posts Proxy[/bold cyan]

Forwards /posts requests to the upstream posts API and relays its JSON.

[bold]Usage:[/bold]
    posts-proxy                Start with live dashboard
    posts-proxy --port 9000    Start on another port
    posts-proxy --config       Show config location
    posts-proxy --help         Show this help
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
