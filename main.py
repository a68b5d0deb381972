import argparse
import sys
import threading

import setproctitle
from loguru import logger

from config.data import APP_NAME, load_config
from modules.launcher.controller import QueryController
from modules.launcher.dispatch import CommandContext, Dispatcher
from modules.launcher.registry import PluginRegistry
from modules.launcher.sources import ApplicationSource, CommandSource

for log in [
    "modules.launcher.matching",
]:
    logger.disable(log)


def open_plugin(context: CommandContext):
    # Plugin hosting lives outside the launcher; report what would open.
    logger.info(
        f"Open {context.plugin.name}/{context.feature.code}"
        + (f" with {context.ext.payload!r}" if context.ext else "")
    )


def build_controller(config, scheduler=None) -> QueryController:
    dispatcher = Dispatcher(open_plugin=open_plugin)
    commands = CommandSource(PluginRegistry(config["plugins_file"]), dispatcher)
    applications = ApplicationSource(dispatcher=dispatcher)
    commands.set_config(config["sources"].get("commands", {}))
    applications.set_config(config["sources"].get("applications", {}))
    return QueryController(commands, applications, scheduler)


def load_apps_async(controller: QueryController, scheduler):
    from modules.launcher.desktop_apps import list_apps

    def publish(apps):
        controller.set_apps(apps)
        return False

    def worker():
        scheduler.idle_add(publish, list_apps())

    threading.Thread(target=worker, name="desktop-apps", daemon=True).start()


def print_results(results):
    for item in results:
        marker = "*" if item.is_best_match else " "
        print(f"{marker} [{item.value}] {item.name}  {item.desc}")


if __name__ == "__main__":
    setproctitle.setproctitle(APP_NAME)

    parser = argparse.ArgumentParser(prog=APP_NAME)
    parser.add_argument("query", nargs="?", help="resolve once and exit")
    parser.add_argument("--strict", action="store_true", help="run the best literal match")
    parser.add_argument("--level", help="log level")
    args = parser.parse_args()

    # Load configuration
    config = load_config()

    logger.remove()
    logger.add(sys.stderr, level=(args.level or config["log_level"]).upper())

    if args.query is not None:
        controller = build_controller(config)
        if config["load_desktop_apps"]:
            from modules.launcher.desktop_apps import list_apps

            controller.set_apps(list_apps())
        if args.strict:
            controller.on_global_shortcut(args.query)
        else:
            print_results(controller.resolve(args.query))
        sys.exit(0)

    from gi.repository import GLib

    from modules.launcher.scheduler import GLibScheduler

    scheduler = GLibScheduler()
    controller = build_controller(config, scheduler)
    controller.connect(print_results)
    if config["load_desktop_apps"]:
        load_apps_async(controller, scheduler)

    def read_stdin(channel, condition):
        line = channel.readline()
        if not line:
            loop.quit()
            return False
        line = line.rstrip("\n")
        if line.startswith("!"):
            controller.on_global_shortcut(line[1:])
        else:
            controller.set_query(line)
        return True

    loop = GLib.MainLoop()
    channel = GLib.IOChannel.unix_new(sys.stdin.fileno())
    GLib.io_add_watch(channel, GLib.PRIORITY_DEFAULT, GLib.IOCondition.IN | GLib.IOCondition.HUP, read_stdin)
    logger.info(f"{APP_NAME} ready: type a query per line, prefix with ! to run it")
    loop.run()
