#!/usr/bin/env python3
"""
Main entry point for the SRG20 Token Lookup tool.

This script provides a unified interface to the CLI, the web dashboard and
the example script.
"""

import sys
import argparse


def main():
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(
        description="SRG20 Token Lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Look up a token from the command line
  python main.py cli lookup 0x... --network BNB

  # Start web dashboard
  python main.py web --port 8050

  # Run the example script
  python main.py example basic

For more information, see README.md
        """
    )

    subparsers = parser.add_subparsers(dest="mode", help="Operation mode")

    cli_parser = subparsers.add_parser("cli", help="Run command-line interface")
    cli_parser.add_argument("args", nargs=argparse.REMAINDER, help="CLI arguments")

    web_parser = subparsers.add_parser("web", help="Start web dashboard")
    web_parser.add_argument("--config", "-c", default="config.yaml", help="Config file path")
    web_parser.add_argument("--port", type=int, default=None, help="Port to run on")
    web_parser.add_argument("--debug", action="store_true", help="Run in debug mode")

    example_parser = subparsers.add_parser("example", help="Run example scripts")
    example_parser.add_argument("script", choices=["basic"], help="Example script to run")

    args = parser.parse_args()

    if not args.mode:
        parser.print_help()
        return

    if args.mode == "cli":
        from srg_lookup.interfaces.cli import main as cli_main

        # Hand the remaining arguments to Click
        sys.argv = ["cli"] + args.args
        cli_main()

    elif args.mode == "web":
        from srg_lookup.interfaces.web import main as web_main

        sys.argv = ["web", "--config", args.config]
        if args.port:
            sys.argv += ["--port", str(args.port)]
        if args.debug:
            sys.argv.append("--debug")
        web_main()

    elif args.mode == "example":
        if args.script == "basic":
            from examples.basic_usage import main as basic_main
            basic_main()


if __name__ == "__main__":
    main()
