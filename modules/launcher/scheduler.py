from gi.repository import GLib


class GLibScheduler:
    """Runs callbacks on the GLib main loop."""

    def timeout_add(self, interval_ms: int, callback, *args) -> int:
        return GLib.timeout_add(interval_ms, callback, *args)

    def source_remove(self, source_id: int):
        GLib.source_remove(source_id)

    def idle_add(self, callback, *args) -> int:
        return GLib.idle_add(callback, *args)
