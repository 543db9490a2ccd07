#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for GFALace.

This module provides the main CLI entry point and subcommands for lacing
pangenome block graphs into one GFA.
"""

import logging
import sys
import click
from pathlib import Path
from typing import List, Optional
import yaml

from .version import __version__
from .config import ConfigParser, ConfigValidationError, save_config_template, validate_config
from .errors import GFALaceError
from .io_utils import export_lace_stats, export_laced_graph_to_gfa, validate_gfa_file
from .lacing_core import lace_gfa_files


LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Report per-block counts, overlaps and totals on stderr')
@click.option('--debug', '-d', is_flag=True, help='Enable debug diagnostics (implies --verbose)')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, debug, quiet):
    """
    GFALace: lace pangenome block graphs into one GFA

    Merges independently built GFA blocks, giving every block its own node id
    range and splicing path fragments named sample#haplotype#contig:start-end
    back into genome-level paths.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['DEBUG'] = debug
    ctx.obj['QUIET'] = quiet


def _setup_logging(ctx, config_level: str):
    """Configure the root logger on stderr; CLI flags win over the config level."""
    if ctx.obj.get('DEBUG'):
        level = logging.DEBUG
    elif ctx.obj.get('VERBOSE'):
        level = logging.INFO
    else:
        level = getattr(logging, str(config_level).upper(), logging.ERROR)

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def _read_gfa_list(list_file: Path) -> List[str]:
    """Read GFA paths from a list file, one per line; blanks and '#' comments ignored."""
    paths = []
    with open(list_file, 'r') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                paths.append(line)
    return paths


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='gfalace_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = ConfigParser(config_file).to_dict()
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = ConfigParser(config_file).to_dict()
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo("\nInput:")
    click.echo(f"  Temporary directory: {config['input']['temp_dir'] or '(system default)'}")
    click.echo("\nLacing:")
    click.echo(f"  Report overlaps: {config['lacing']['report_overlaps']}")
    click.echo("\nOutput:")
    click.echo(f"  Include sequence: {config['output']['include_sequence']}")
    click.echo(f"  Stats JSON: {config['output']['stats_json'] or '(none)'}")
    click.echo("\nLogging:")
    click.echo(f"  Level: {config['logging']['level']}")


# ============================================================================
# Lacing Commands
# ============================================================================

@main.command()
@click.argument('gfa_files', nargs=-1, type=click.Path())
@click.option('--gfa', '-g', 'gfa_options', multiple=True, type=click.Path(),
              help='GFA block file, plain or .gz (can specify multiple times)')
@click.option('--gfa-list', '-l', type=click.Path(exists=True),
              help='Text file listing GFA block paths, one per line')
@click.option('--output', '-o', required=True, type=click.Path(),
              help='Output GFA file (.gz for compressed output)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='Configuration file (YAML)')
@click.option('--temp-dir', type=click.Path(file_okay=False),
              help='Directory for decompressed copies of gzip inputs')
@click.option('--stats', 'stats_file', type=click.Path(),
              help='Write lace statistics to this JSON file')
@click.option('--no-sequence', is_flag=True,
              help="Write '*' instead of segment sequences")
@click.pass_context
def lace(ctx, gfa_files, gfa_options, gfa_list, output, config_file, temp_dir,
         stats_file, no_sequence):
    """Lace GFA blocks into a single graph with reconstructed genome paths."""
    try:
        parser = ConfigParser(config_file)
    except (ConfigValidationError, OSError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    parser.merge_cli_overrides({
        'input.temp_dir': temp_dir,
        'output.stats_json': stats_file,
        'output.include_sequence': False if no_sequence else None,
    })

    errors = validate_config(parser.to_dict())
    if errors:
        click.echo("❌ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    _setup_logging(ctx, parser.get('logging.level', 'ERROR'))

    inputs = list(gfa_options) + list(gfa_files)
    try:
        if gfa_list:
            inputs.extend(_read_gfa_list(Path(gfa_list)))
    except OSError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not inputs:
        click.echo("❌ Error: No input GFA blocks specified.", err=True)
        click.echo("\nUse one of:", err=True)
        click.echo("  gfalace lace -g block1.gfa -g block2.gfa.gz -o out.gfa", err=True)
        click.echo("  gfalace lace --gfa-list blocks.txt -o out.gfa", err=True)
        sys.exit(1)

    try:
        result = lace_gfa_files(
            inputs,
            temp_dir=parser.get('input.temp_dir'),
            report_overlaps=parser.get('lacing.report_overlaps', True),
        )
        export_laced_graph_to_gfa(
            result.graph, output,
            include_sequence=parser.get('output.include_sequence', True),
        )
        stats_json: Optional[str] = parser.get('output.stats_json')
        if stats_json:
            export_lace_stats(result, stats_json)
    except (GFALaceError, OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not ctx.obj.get('QUIET'):
        click.echo(f"✓ Laced {len(result.blocks)} blocks into {output}")
        click.echo(f"  Nodes: {result.graph.node_count}  Edges: {result.graph.edge_count}  "
                   f"Paths: {result.graph.path_count}")
        if result.overlaps:
            click.echo(f"  ⚠️  {len(result.overlaps)} overlapping range pairs "
                       f"(use --verbose for details)")


@main.command()
@click.argument('gfa_file', type=click.Path(exists=True))
def stats(gfa_file):
    """Show record counts of a GFA file."""
    try:
        counts = validate_gfa_file(gfa_file)
    except (GFALaceError, OSError, UnicodeDecodeError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"GFA: {gfa_file}")
    click.echo(f"  Version: {counts['version'] or 'unknown'}")
    click.echo(f"  Segments: {counts['segments']}")
    click.echo(f"  Links: {counts['links']}")
    click.echo(f"  Paths: {counts['paths']}")


if __name__ == '__main__':
    main()
