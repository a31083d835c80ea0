"""
Export Module - Writes every reachable page to a directory as static files

Each page path becomes ``<path>/index.html`` so the output can be served by
any static file host with clean URLs.
"""

from pathlib import Path

import click

from .helpers import site_paths


EXTRA_FILES = ['/sitemap.xml', '/robots.txt']


def output_path_for(output_dir, path):
    """``/blog/x`` -> ``<output_dir>/blog/x/index.html``; files keep their name"""
    output_dir = Path(output_dir)
    relative = path.strip('/')
    if path in EXTRA_FILES:
        return output_dir / relative
    if not relative:
        return output_dir / 'index.html'
    return output_dir / relative / 'index.html'


def export_site(app, output_dir):
    """
    Render all pages through the app and write them under ``output_dir``

    Args:
        app: Flask application
        output_dir: target directory, created if missing

    Returns:
        list[Path]: files written, in render order

    Raises:
        RuntimeError: if any page does not render with status 200
    """
    from extensions import get_resolver

    with app.app_context():
        paths = site_paths(get_resolver()) + EXTRA_FILES

    written = []
    client = app.test_client()
    for path in paths:
        response = client.get(path)
        if response.status_code != 200:
            raise RuntimeError(f"Export failed: {path} returned {response.status_code}")

        target = output_path_for(output_dir, path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(response.get_data())
        written.append(target)
        app.logger.info(f"Exported {path} -> {target}")

    return written


def register_commands(app):
    """Register the ``flask export-site`` command"""

    @app.cli.command('export-site')
    @click.argument('output_dir', type=click.Path(file_okay=False), default='build')
    def export_site_command(output_dir):
        """Render every page into OUTPUT_DIR (default: build)."""
        try:
            written = export_site(app, output_dir)
        except RuntimeError as e:
            raise click.ClickException(str(e))
        click.echo(f"Exported {len(written)} files to {output_dir}")


__all__ = ['export_site', 'output_path_for', 'register_commands']
