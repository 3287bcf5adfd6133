"""Example: a download notifier that owns an ObserverRegistry (composition, no subclassing)."""

import logging
from typing import Callable

from observers import IdentityRef, InvalidStateError, ObserverRegistry

logging.basicConfig(level=logging.INFO)

ProgressCallback = Callable[[str, int], None]


class DownloadNotifier:
    """Owns a registry of progress callbacks and walks a snapshot to notify them."""

    def __init__(self) -> None:
        self._listeners: ObserverRegistry[IdentityRef[ProgressCallback]] = ObserverRegistry("downloads")

    def add_listener(self, callback: ProgressCallback) -> None:
        self._listeners.register(IdentityRef(callback))

    def remove_listener(self, callback: ProgressCallback) -> None:
        self._listeners.unregister(IdentityRef(callback))

    def progress(self, url: str, percent: int) -> None:
        for listener in self._listeners.snapshot():
            listener(url, percent)


def main() -> None:
    notifier = DownloadNotifier()

    def print_progress(url: str, percent: int) -> None:
        print(f"{url}: {percent}%")

    notifier.add_listener(print_progress)
    try:
        notifier.add_listener(print_progress)
    except InvalidStateError as e:
        print(f"rejected: {e.message}")

    notifier.progress("https://example.com/file.bin", 50)
    notifier.remove_listener(print_progress)
    notifier.progress("https://example.com/file.bin", 100)


if __name__ == "__main__":
    main()
