"""hyperworker-install: Install Hyperworker Claude Code skills into a project.

Import from submodules:
- version: __version__
- cli: main (console entry point)
- operations.install: run_install (programmatic entry point)
"""

from hyperworker_install.version import __version__ as __version__
