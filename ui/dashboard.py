"""Real-time CLI dashboard for proxy monitoring."""

from collections import Counter
from datetime import datetime
from threading import Lock

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from ui.log_utils import write_cli_log

console = Console()


class ForwardInfo:
    """Info about a single forwarded call."""

    def __init__(self, method: str, url: str, status: int, timestamp: datetime):
        self.method = method
        self.url = url
        self.status = status
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing recent upstream calls and errors."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._forwards: list[ForwardInfo] = []
        self._max_forwards = 10
        self._request_count: Counter[str] = Counter()
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    def log_forward(self, method: str, url: str, status: int) -> None:
        """Log a completed upstream call."""
        with self._lock:
            self._request_count[method] += 1
            self._forwards.insert(0, ForwardInfo(method, url, status, datetime.now()))
            self._forwards = self._forwards[: self._max_forwards]
            self._refresh()
            write_cli_log("FORWARD", f"{method} {url}", status=status)

    def log_error(self, route: str, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{route} {status}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log("ERROR", message[:200], route=route, status=status)

    @property
    def request_count(self) -> dict[str, int]:
        with self._lock:
            return dict(self._request_count)

    @property
    def errors(self) -> list[str]:
        with self._lock:
            return list(self._errors)

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=5),
        )

        layout["header"].update(self._build_header())
        layout["body"].update(self._build_forwards_panel())
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with stats."""
        stats = Text()
        stats.append("Posts Proxy", style="bold cyan")
        for method in ("GET", "POST", "PUT", "PATCH", "DELETE"):
            stats.append("  |  ")
            stats.append(f"{method}: {self._request_count[method]}", style="blue")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.proxy.port}", style="dim")

        return Panel(stats, style="cyan")

    def _build_forwards_panel(self) -> Panel:
        """Build the recent forwards table."""
        if self._forwards:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Method", width=7)
            table.add_column("Status", width=6)
            table.add_column("URL", ratio=1)

            for fw in self._forwards:
                style = "red" if fw.status >= 400 else "green"
                table.add_row(
                    fw.timestamp.strftime("%H:%M:%S"),
                    fw.method,
                    Text(str(fw.status), style=style),
                    fw.url,
                )

            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        return Panel(content, title="[blue]Upstream calls[/blue]", border_style="blue")

    def _build_footer(self) -> Panel:
        """Build footer with errors and help."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        else:
            content = Text(
                f"Forwarding http://localhost:{self.config.proxy.port}/posts -> "
                f"{self.config.upstream.base_url}",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")
