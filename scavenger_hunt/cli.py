"""
Command-line driver for the Scavenger Hunt tracker.
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from . import __version__
from .config.settings import Config, ConfigManager, config_manager
from .core.state_manager import HuntStateManager
from .models.item import HuntItem
from .storage.key_value import FileStore


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='scavenger-hunt',
        description='Scavenger Hunt Tracker',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Items can be given by their position in the list (1-10) or by id.

Examples:
  %(prog)s list                        # Show every item and its clue
  %(prog)s mark 3 ~/photos/ticket.jpg  # Mark item 3 found
  %(prog)s clear 3                     # Remove item 3's photo
  %(prog)s submit                      # Submit a completed hunt
  %(prog)s config set photos.jpeg_quality 80
  %(prog)s config reset                # Restore default settings'''
    )

    parser.add_argument(
        '--config-dir',
        help='Custom configuration directory'
    )
    parser.add_argument(
        '--url',
        help='Override the submission endpoint'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'Scavenger Hunt Tracker v{__version__}'
    )

    commands = parser.add_subparsers(dest='command')
    commands.add_parser('status', help='Show progress and current reward')
    commands.add_parser('list', help='List items with their clues')

    mark = commands.add_parser('mark', help='Attach a photo and mark an item found')
    mark.add_argument('item', help='Item position or id')
    mark.add_argument('image', nargs='?', help='Path to the photo (omit to cancel)')

    clear = commands.add_parser('clear', help='Remove the photo from an item')
    clear.add_argument('item', help='Item position or id')

    commands.add_parser('reset', help='Clear every photo')
    commands.add_parser('submit', help='Submit the completed hunt')
    config_cmd = commands.add_parser('config', help='Show or change the configuration')
    config_actions = config_cmd.add_subparsers(dest='config_action')
    set_cmd = config_actions.add_parser('set', help='Change a setting and save it')
    set_cmd.add_argument('key', help='Setting name, e.g. submission.url')
    set_cmd.add_argument('value', help='New value (JSON literals like 50 or true are parsed)')
    config_actions.add_parser('reset', help='Restore default settings')

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = 'status'
    return args


def get_config_manager(args) -> ConfigManager:
    """Get the config manager for the chosen configuration directory."""
    if args.config_dir:
        return ConfigManager(config_file=Path(args.config_dir).expanduser() / "config.json")
    return config_manager


def load_config(args, settings: ConfigManager) -> Config:
    """Load configuration, applying command line overrides."""
    config = settings.config.model_copy(deep=True)

    if args.config_dir:
        config.directories.config = str(Path(args.config_dir).expanduser().resolve())
    if args.url:
        config.submission.url = args.url

    return config


def parse_setting_value(raw: str) -> Any:
    """Read numbers, booleans and quoted strings as JSON, anything else as text."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def resolve_item(manager: HuntStateManager, ref: str) -> Optional[HuntItem]:
    """Find an item by 1-based position or by id."""
    if ref.isdigit():
        position = int(ref)
        items = manager.items
        if 1 <= position <= len(items):
            return items[position - 1]
        return None
    return manager.get_item(ref)


def show_status(manager: HuntStateManager) -> None:
    print(f"🔎 Found: {manager.found_count()}/{manager.total_count()}")
    reward = manager.reward()
    if reward:
        print(f"🎁 Reward: {reward}")
    else:
        print("🎁 Reward: none yet")


def show_items(manager: HuntStateManager) -> None:
    for position, item in enumerate(manager.items, 1):
        mark = "✅" if item.found else "⬜"
        print(f"{position:>2}. {mark} {item.title}")
        print(f"      {item.clue}")
        print(f"      id: {item.id}")


def show_config(config: Config) -> None:
    print("📋 Current Configuration:")
    print(f"  Data directory: {config.get_data_dir()}")
    print(f"  Store directory: {config.get_store_dir()}")
    print(f"  State key: {config.storage.state_key}")
    print(f"  Submission URL: {config.submission.url}")
    print(f"  Error status counts as failure: {config.submission.treat_error_status_as_failure}")
    print(f"  JPEG quality: {config.photos.jpeg_quality}")


def run_config_command(args, settings: ConfigManager, config: Config) -> int:
    """Show, change or reset the saved configuration."""
    if args.config_action == 'set':
        try:
            settings.update(**{args.key: parse_setting_value(args.value)})
        except KeyError:
            print(f"❌ Unknown setting '{args.key}'")
            print(f"   Available: {', '.join(settings.setting_names())}")
            return 1
        except ValidationError as e:
            print(f"❌ Invalid value for '{args.key}': {e.errors()[0]['msg']}")
            return 1
        print(f"✅ {args.key} updated")
    elif args.config_action == 'reset':
        settings.reset_to_defaults()
        print("🔄 Configuration reset to defaults")
    else:
        show_config(config)
    return 0


def run_command(args, manager: HuntStateManager) -> int:
    """Run a single command against an initialized manager."""
    if args.command == 'status':
        show_status(manager)
    elif args.command == 'list':
        show_items(manager)
    elif args.command in ('mark', 'clear'):
        item = resolve_item(manager, args.item)
        if item is None:
            print(f"❌ No item matches '{args.item}'")
            return 1

        if args.command == 'clear':
            manager.clear_found(item.id)
            print(f"🗑️  Cleared '{item.title}'")
        elif not args.image:
            print("Cancelled, no photo taken")
        else:
            try:
                image_bytes = Path(args.image).expanduser().read_bytes()
            except OSError as e:
                print(f"❌ Could not read photo: {e}")
                return 1
            if not manager.mark_found(item.id, image_bytes):
                return 1
            print(f"✅ Found '{item.title}'")
        show_status(manager)
    elif args.command == 'reset':
        manager.reset_all()
        print("🔄 All progress reset")
    elif args.command == 'submit':
        result = asyncio.run(manager.submit())
        print(("✅ " if result.success else "❌ ") + result.message)
        return 0 if result.success else 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface."""
    args = parse_arguments(argv)
    settings = get_config_manager(args)
    config = load_config(args, settings)

    if args.command == 'config':
        return run_config_command(args, settings, config)

    config.ensure_directories()
    manager = HuntStateManager(store=FileStore(config.get_store_dir()), config=config)
    manager.initialize()

    try:
        return run_command(args, manager)
    except KeyboardInterrupt:
        print("\nExiting...")
        return 130


if __name__ == "__main__":
    sys.exit(main())
