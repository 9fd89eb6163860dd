#!/usr/bin/env python3
"""
run.py - Main entry point for the cookies & milk game service
"""

import argparse
import sys

from cookiemilk.debug import debug, DebugLevel

# --- Utility Functions ---

def configure_debug(args):
    """Configure logging from args.debug, args.debug_level, args.log_file and args.log_components."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.configure(level=DebugLevel[args.debug_level.upper()])

    if args.log_file:
        debug.configure(log_file=args.log_file)

    if args.log_components:
        debug.configure(components=args.log_components.split(","))

def add_common_arguments(parser):
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--debug-level', default='info',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging verbosity')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')
    parser.add_argument('--log-components', default=None,
                        help='Comma-separated components to log (board,game,shared,web,cli)')

# --- Command Handlers ---

def handle_serve(args):
    """Handle the 'serve' command."""
    import uvicorn
    from cookiemilk.interfaces.web import create_app

    configure_debug(args)
    debug.info(f"Serving on {args.host}:{args.port}")
    uvicorn.run(create_app(), host=args.host, port=args.port)

def handle_game_command(args):
    """Handle the 'game' component commands."""
    from cookiemilk.interfaces.cli import SimpleCLI

    configure_debug(args)
    cli = SimpleCLI()
    if args.command == 'play':
        cli.play()
    elif args.command == 'random':
        cli.random_board()

# --- Main Entry Point ---

def main(argv=None):
    """Main entry point for the cookies & milk game service."""
    parser = argparse.ArgumentParser(
        description='Cookies & milk four-in-a-row',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Serve the HTTP endpoints on port 8000
    python run.py serve --port 8000

    # Play in the terminal
    python run.py game play

    # Print a random board
    python run.py game random
    """
    )
    subparsers = parser.add_subparsers(dest='component', help='Component to use')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP server')
    serve_parser.add_argument('--host', default='127.0.0.1', help='Interface to bind')
    serve_parser.add_argument('--port', type=int, default=8000, help='Port to bind')
    add_common_arguments(serve_parser)

    game_parser = subparsers.add_parser('game', help='Play in the terminal')
    game_parser.add_argument('command', choices=['play', 'random'], help='Game command')
    add_common_arguments(game_parser)

    args = parser.parse_args(argv)

    if args.component == 'serve':
        handle_serve(args)
    elif args.component == 'game':
        handle_game_command(args)
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
