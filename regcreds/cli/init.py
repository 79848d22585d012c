"""
Init CLI handler.

Handles: regcreds init
"""

from regcreds.core.config import get_config


def handle_init(args) -> int:
    """Write the default config file."""
    config = get_config()

    try:
        written = config.save_default_config()
    except OSError as e:
        print(f"Error: {e}")
        return 1

    if written:
        print(f"✓ Config written: {config.config_file}")
    else:
        print(f"Config already exists: {config.config_file}")
    return 0
