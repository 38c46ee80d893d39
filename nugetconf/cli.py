"""Command-line interface for nugetconf."""

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

from nugetconf import __version__
from nugetconf.config.loader import load_config, get_config_value, ConfigError
from nugetconf.config.validator import validate_config, ValidationError
from nugetconf.config.settings import build_settings
from nugetconf.nuget.parser import ParseError
from nugetconf.nuget.source_registry import SourceRegistry, UnsupportedOperationError
from nugetconf.nuget.name_encoder import encode_element_name
from nugetconf.proxy import build_proxy_url


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='nugetconf',
        description='Manage package sources and credentials in nuget.config',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List sources in ./nuget.config
  nugetconf list

  # Add an authenticated feed to a specific file
  nugetconf --nuget-config build/nuget.config add MyFeed https://feed/index.json \\
      --username build --password secret

  # Remove a feed and its credentials, keeping a backup of the file
  nugetconf --backup remove MyFeed

  # Print the proxy URL derived from AGENT_PROXY* variables
  nugetconf proxy
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=Path,
        metavar='PATH',
        help='Path to nugetconf.yaml (default: ./nugetconf.yaml if present)'
    )

    parser.add_argument(
        '--nuget-config',
        type=Path,
        metavar='PATH',
        help='Path to the nuget.config file to edit. Overrides config.'
    )

    parser.add_argument(
        '--backup',
        action='store_true',
        help='Back up nuget.config before modifying it. Overrides config.'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    subparsers.add_parser('list', help='List package sources')

    add_parser = subparsers.add_parser('add', help='Add a package source')
    add_parser.add_argument('name', help='Source name')
    add_parser.add_argument('uri', help='Source URI')
    add_parser.add_argument('--username', help='Feed username')
    add_parser.add_argument('--password', help='Feed password (stored as ClearTextPassword)')

    remove_parser = subparsers.add_parser('remove', help='Remove a package source and its credentials')
    remove_parser.add_argument('name', help='Source name')

    api_key_parser = subparsers.add_parser('set-api-key', help='Set an API key (not supported)')
    api_key_parser.add_argument('source', help='Source URI')
    api_key_parser.add_argument('api_key', help='API key')

    subparsers.add_parser('proxy', help='Print the authenticated proxy URL')

    return parser


def _setup_logging(config: dict) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
    """
    logging_config = config.get('logging', {})

    level_str = logging_config.get('level', 'INFO').upper()
    level = getattr(logging, level_str, logging.INFO)

    handlers = []

    if logging_config.get('console', True):
        # Log to stderr; stdout carries command output
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(1)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )


def create_registry(config: dict) -> SourceRegistry:
    """Create a SourceRegistry from the nuget section of the config."""
    return SourceRegistry(
        get_config_value(config, 'nuget.config_path'),
        pretty_print=get_config_value(config, 'nuget.pretty_print', False),
        backup=get_config_value(config, 'nuget.backup', False),
        backup_keep=get_config_value(config, 'nuget.backup_keep', 5),
    )


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for nugetconf CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        validate_config(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    _setup_logging(config)

    # Apply CLI overrides
    if args.nuget_config:
        config['nuget']['config_path'] = str(args.nuget_config)

    if args.backup:
        config['nuget']['backup'] = True

    try:
        return run_command(config, args)
    except (ParseError, UnsupportedOperationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def run_command(config: dict, args: argparse.Namespace) -> int:
    """
    Run the selected subcommand.

    Args:
        config: Loaded configuration
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    if args.command == 'proxy':
        proxy_url = build_proxy_url(build_settings(config))
        if proxy_url is None:
            logger.info("No proxy configured")
            return 0
        print(proxy_url)
        return 0

    registry = create_registry(config)

    if args.command == 'list':
        document = registry.load()
        for source in document.addressable_sources():
            marker = ''
            if document.find_credential(encode_element_name(source.feed_name)):
                marker = ' (credentials)'
            print(f"{source.feed_name}\t{source.feed_uri}{marker}")
        return 0

    if args.command == 'add':
        if bool(args.username) != bool(args.password):
            logger.warning("Both --username and --password are needed to store credentials")
        registry.add_source(args.name, args.uri, args.username, args.password)
        logger.info(f"Added source '{args.name}' to {registry.config_path}")
        return 0

    if args.command == 'remove':
        registry.remove_source(args.name)
        logger.info(f"Removed source '{args.name}' from {registry.config_path}")
        return 0

    if args.command == 'set-api-key':
        registry.set_api_key(args.source, args.api_key)
        return 0

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 1


if __name__ == '__main__':
    sys.exit(main())
