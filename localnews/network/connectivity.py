"""Network connectivity check."""

import socket
from typing import List

import psutil
from rich.console import Console

console = Console(stderr=True)

LOOPBACK_PREFIXES = ("lo", "Loopback")


def _is_loopback(name: str, flags: str) -> bool:
    return "loopback" in flags.split(",") or name.startswith(LOOPBACK_PREFIXES)


class ConnectivityChecker:
    """Decide whether the device has an active network transport.

    A transport is any non-loopback interface that is up (Wi-Fi, cellular or
    ethernet). When ``probe_reachability`` is set, a TCP connection to the
    probe host must also succeed. The check runs on every call and blocks,
    so async callers run it in a worker thread.
    """

    def __init__(
        self,
        probe_host: str = "1.1.1.1",
        probe_port: int = 53,
        timeout: float = 3.0,
        probe_reachability: bool = False,
    ) -> None:
        """Initialize connectivity checker."""
        self.probe_host = probe_host
        self.probe_port = probe_port
        self.timeout = timeout
        self.probe_reachability = probe_reachability

    def active_transports(self) -> List[str]:
        """Names of non-loopback interfaces that are up."""
        try:
            stats = psutil.net_if_stats()
        except OSError as e:
            console.print(f"[yellow]Could not read network interfaces: {e}[/yellow]")
            return []

        return [
            name
            for name, nic in stats.items()
            if nic.isup and not _is_loopback(name, getattr(nic, "flags", ""))
        ]

    def can_reach_probe_host(self) -> bool:
        """Open and close a TCP connection to the probe host."""
        try:
            with socket.create_connection((self.probe_host, self.probe_port), timeout=self.timeout):
                return True
        except OSError as e:
            console.print(f"[dim]Connectivity probe to {self.probe_host}:{self.probe_port} failed: {e}[/dim]")
            return False

    def is_internet_connected(self) -> bool:
        transports = self.active_transports()
        if not transports:
            console.print("[dim]No active network interface[/dim]")
            return False

        if self.probe_reachability:
            return self.can_reach_probe_host()
        return True

    def __call__(self) -> bool:
        return self.is_internet_connected()
