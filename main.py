#!/usr/bin/env python3
"""
Supergroup Directory - Main Entry Point

Single entry point for inspecting and serving the supergroup table:
- Print a summary of the parsed table
- Export the parsed table as JSON
- Show configuration
- Run the development API server

Usage:
    python main.py show [--data-dir DIR]
    python main.py export [--data-dir DIR] [--output FILE] [--indent N]
    python main.py config
    python main.py serve [--host HOST] [--port PORT] [--debug]
"""

import argparse
import json
import sys
from pathlib import Path

from supergroups.groups_cache import GroupsDataCache, load_groups_data
from supergroups.table_assembler import TableAssembler
from supergroups.utils.config import config, get_data_dir, get_env_bool, get_env_int, get_env_string


def _load(args):
    """Load GroupsData from --data-dir or the configured directory."""
    data_dir = Path(args.data_dir) if args.data_dir else get_data_dir()
    if not data_dir.is_dir():
        print(f"Error: Data directory not found: {data_dir}")
        sys.exit(1)
    return load_groups_data(GroupsDataCache(TableAssembler(data_dir)))


def cmd_show(args):
    """Print a summary of the parsed table."""
    groups_data = _load(args)
    if groups_data.is_empty:
        print("No supergroups found")
        return

    print(groups_data)
    if args.verbose:
        for sg in groups_data.supergroups:
            print(f"\n{sg.name}")
            print(f"  Mission: {sg.mission or '-'}")
            print(f"  Goals: {sg.goals or '-'}")
            print(f"  Vision: {sg.vision or '-'}")
            if sg.about_url:
                print(f"  About: {sg.about_url}")


def cmd_export(args):
    """Write the parsed table as JSON."""
    groups_data = _load(args)
    payload = json.dumps(groups_data.to_dict(), indent=args.indent, ensure_ascii=False)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(payload + "\n", encoding="utf-8")
        print(f"✅ Exported {len(groups_data)} supergroups to {output_path}")
    else:
        print(payload)


def cmd_config(args):
    """Print configuration summary."""
    config.print_config_summary()


def cmd_serve(args):
    """Run the Flask development server."""
    from supergroups.api import app
    app.run(debug=args.debug, host=args.host, port=args.port)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Supergroup directory data tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize the table in ./data
  python main.py show

  # Export JSON from another directory
  python main.py export --data-dir /srv/supergroups --output groups.json

  # Run the API locally
  python main.py serve --port 5000
        """
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Show command
    show_parser = subparsers.add_parser('show', help='Print a summary of the parsed table')
    show_parser.add_argument('--data-dir', help='Data directory (default: SUPERGROUPS_DATA_DIR or ./data)')
    show_parser.add_argument('--verbose', '-v', action='store_true', help='Print mission, goals and vision')
    show_parser.set_defaults(func=cmd_show)

    # Export command
    export_parser = subparsers.add_parser('export', help='Export the parsed table as JSON')
    export_parser.add_argument('--data-dir', help='Data directory (default: SUPERGROUPS_DATA_DIR or ./data)')
    export_parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    export_parser.add_argument('--indent', type=int, default=2, help='JSON indent (default: 2)')
    export_parser.set_defaults(func=cmd_export)

    # Config command
    config_parser = subparsers.add_parser('config', help='Show configuration')
    config_parser.set_defaults(func=cmd_config)

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Run the development API server')
    serve_parser.add_argument('--host', default=get_env_string('SUPERGROUPS_HOST', '127.0.0.1'),
                              help='Bind address (default: SUPERGROUPS_HOST or 127.0.0.1)')
    serve_parser.add_argument('--port', type=int, default=get_env_int('SUPERGROUPS_PORT', 5000),
                              help='Port (default: SUPERGROUPS_PORT or 5000)')
    serve_parser.add_argument('--debug', action='store_true', default=get_env_bool('SUPERGROUPS_DEBUG', False),
                              help='Enable Flask debug mode (default: SUPERGROUPS_DEBUG)')
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Cancelled by user")
        sys.exit(130)
    except Exception as e:
        print(f"\n❌ Error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
