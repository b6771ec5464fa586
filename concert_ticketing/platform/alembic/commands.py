"""Alembic command shortcuts exposed as project scripts."""

import sys

from alembic import command
from alembic.config import Config

from concert_ticketing.platform.constant.path import ALEMBIC_DIR, BASE_DIR


def _config() -> Config:
    alembic_cfg = Config(str(BASE_DIR / 'alembic.ini'))
    alembic_cfg.set_main_option('script_location', str(ALEMBIC_DIR))
    return alembic_cfg


def upgrade() -> None:
    """Upgrade database to latest migration."""
    command.upgrade(_config(), 'head')


def downgrade() -> None:
    """Downgrade database by one migration."""
    command.downgrade(_config(), '-1')


def make_migration() -> int:
    """Create a new migration based on model changes."""
    if len(sys.argv) < 2:
        print("Usage: make-migration 'migration message'")
        return 1
    command.revision(_config(), message=' '.join(sys.argv[1:]), autogenerate=True)
    return 0
