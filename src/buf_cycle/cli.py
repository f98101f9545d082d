import argparse
import curses

from buf_cycle import __version__
from buf_cycle.app import run_editor
from buf_cycle.config import load_config
from buf_cycle.keys import KeyMap


def main():
    p = argparse.ArgumentParser(description="Curses buffer switcher")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.buf-cycle/configs/, ./configs/, or use full path)")
    p.add_argument("-t", "--timeout", type=float, default=None,
                   help="Seconds of inactivity that end a switch session - overrides config")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to buf_cycle_debug.log in current directory")
    p.add_argument("names", nargs="*",
                   help="Names of scratch buffers to open (default: *scratch* notes todo)")
    args = p.parse_args()

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        p.error(str(e))

    if args.timeout is not None:
        if args.timeout <= 0:
            p.error("timeout must be positive")
        config.timeout = args.timeout

    # Fail on bad key specs before the terminal is taken over
    try:
        KeyMap(config.forward_keys, config.backward_keys)
    except ValueError as e:
        p.error(str(e))

    curses.wrapper(run_editor, config, args.names, debug=args.debug)


if __name__ == "__main__":
    main()
