"""CLI entry point using Click."""

from __future__ import annotations

import click


@click.command()
@click.option("--no-color", is_flag=True, help="Disable color output")
@click.version_option(package_name="s-todo")
def main(no_color: bool) -> None:
    """S-Todo - Terminal projects and to-do lists with time tracking."""
    from s_todo.app import TodoApp
    from s_todo.config import get_config_dir, load_config
    from s_todo.logs import setup_logging
    from s_todo.storage import JsonStore

    config_dir = get_config_dir()
    config = load_config(config_dir)
    setup_logging(config_dir, config.log_level)

    app = TodoApp(
        store=JsonStore(config.data_file),
        no_color=no_color,
        theme_file=config.theme_file,
    )
    app.run()
    raise SystemExit(app.return_code or 0)
