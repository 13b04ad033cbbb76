"""Command-line interface for FARS data.

``fars.cli.main`` parses arguments; ``fars.cli.run`` holds the command logic.
"""

from fars.cli.run import build_runtime_config, run_map, run_read, run_summarize

__all__ = ['build_runtime_config', 'run_map', 'run_read', 'run_summarize']
